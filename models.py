class Page:
    def __init__(self, title, body=b""):
        self.title = title
        self.body = body

    @property
    def text(self):
        return self.body.decode("utf-8", errors="replace")

    def __eq__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return self.title == other.title and self.body == other.body

    def __repr__(self):
        return f"Page(title={self.title!r}, body={len(self.body)} bytes)"
