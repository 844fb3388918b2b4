import functools
import re

from flask import Blueprint, abort, request

import wiki

VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")

wiki_bp = Blueprint("wiki", __name__, template_folder="templates")


def make_handler(fn):
    """Wrap a handler taking only a page title into a Flask view.

    The request path must fully match VALID_PATH; anything else is a 404
    and fn is never called.
    """

    @functools.wraps(fn)
    def handler(**kwargs):
        m = VALID_PATH.fullmatch(request.path)
        if m is None:
            abort(404)
        return fn(m.group(2))

    return handler


# path converter so malformed titles still reach make_handler and get a 404 there
wiki_bp.add_url_rule("/view/<path:title>", view_func=make_handler(wiki.view_handler), methods=["GET"])
wiki_bp.add_url_rule("/edit/<path:title>", view_func=make_handler(wiki.edit_handler), methods=["GET"])
wiki_bp.add_url_rule("/save/<path:title>", view_func=make_handler(wiki.save_handler), methods=["POST"])
