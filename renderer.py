from types import MappingProxyType

import markdown
from flask import current_app, render_template
from jinja2 import TemplateError
from markupsafe import Markup

from utils import error_response

TEMPLATE_NAMES = ("edit", "view")
TEMPLATES_KEY = "wiki_templates"


class TemplateLoadError(Exception):
    pass


def load_templates(app, names=TEMPLATE_NAMES):
    """Compile the named templates once, before the app serves anything.

    Raises TemplateLoadError if any template is missing, unreadable or
    does not compile. Callers decide whether that is fatal.
    """
    templates = {}
    for name in names:
        filename = f"{name}.html"
        try:
            templates[name] = app.jinja_env.get_template(filename)
        except (TemplateError, OSError) as e:
            raise TemplateLoadError(f"could not load template {filename}: {e}") from e

    app.logger.debug(f"Loaded templates: {', '.join(names)}")
    return MappingProxyType(templates)


def render_page(name, page):
    template = current_app.extensions[TEMPLATES_KEY][name]

    try:
        return render_template(template, page=page)
    except Exception as e:
        current_app.logger.error(f"Rendering {name} for page {page.title} failed: {e}")
        return error_response(e)


def markdown_filter(text):
    return Markup(markdown.markdown(text, extensions=["tables", "md_in_html"]))
