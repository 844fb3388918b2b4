import os

from models import Page

PAGE_FILE_MODE = 0o600


class PageNotFound(Exception):
    """Raised when a page file cannot be read, whatever the reason."""

    def __init__(self, title, error):
        super().__init__(f"page {title} not found: {error}")
        self.title = title
        self.error = error


def page_path(title, pages_dir="."):
    return os.path.join(pages_dir, f"{title}.txt")


def load_page(title, pages_dir="."):
    filepath = page_path(title, pages_dir)

    try:
        with open(filepath, "rb") as f:
            body = f.read()
    except OSError as e:
        raise PageNotFound(title, e) from e

    return Page(title, body)


def save_page(page, pages_dir="."):
    filepath = page_path(page.title, pages_dir)

    # mode only applies when the file is created; existing files keep theirs
    fd = os.open(filepath, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PAGE_FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(page.body)
