from flask import current_app, redirect, url_for

from models import Page
from pages import PageNotFound, load_page, save_page
from renderer import render_page
from utils import error_response, form_value_bytes


def view_handler(title):
    try:
        page = load_page(title, current_app.config["PAGES_DIR"])
    except PageNotFound as e:
        # any read failure counts as a missing page; only log the unexpected ones
        if not isinstance(e.error, FileNotFoundError):
            current_app.logger.warning(f"Treating page {title} as missing: {e.error}")
        return redirect(url_for("wiki.edit_handler", title=title))

    return render_page("view", page)


def edit_handler(title):
    try:
        page = load_page(title, current_app.config["PAGES_DIR"])
    except PageNotFound:
        page = Page(title)

    return render_page("edit", page)


def save_handler(title):
    page = Page(title, form_value_bytes("body"))

    try:
        save_page(page, current_app.config["PAGES_DIR"])
    except OSError as e:
        current_app.logger.error(f"Could not save page {title}: {e}")
        return error_response(e)

    current_app.logger.info(f"Saved page {title} ({len(page.body)} bytes)")
    return redirect(url_for("wiki.view_handler", title=title))
