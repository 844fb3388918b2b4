import os
from urllib.parse import unquote_to_bytes

from flask import Response, current_app, request


# sanitize the given string of anything with a path seperator, as it could reveal information about the filesystem.
def err_sanitize(err):
    strerr = str(err)
    for part in strerr.split(" "):
        if os.path.sep in part:
            strerr = strerr.replace(part, "<stripped>")
    return strerr


def error_response(err, status=500):
    if current_app.config.get("SANITIZE_ERRORS"):
        message = err_sanitize(err)
    else:
        message = str(err)
    return Response(message + "\n", status=status, mimetype="text/plain")


def form_value_bytes(name):
    """Return a submitted form field as the exact bytes the client sent.

    Urlencoded bodies are decoded here rather than through request.form,
    which would turn invalid UTF-8 into literal percent escapes. Other
    form encodings fall back to request.form as UTF-8.
    """
    if request.mimetype != "application/x-www-form-urlencoded":
        return request.form.get(name, "").encode("utf-8")

    key = name.encode("utf-8")
    for pair in request.get_data().split(b"&"):
        raw_key, _, raw_value = pair.partition(b"=")
        if unquote_to_bytes(raw_key.replace(b"+", b" ")) == key:
            return unquote_to_bytes(raw_value.replace(b"+", b" "))
    return b""
