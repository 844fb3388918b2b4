import logging
import os
import socket
import sys

from flask import Flask

import config
from blueprints.wiki_routes import wiki_bp
from renderer import TEMPLATES_KEY, TemplateLoadError, load_templates, markdown_filter
from utils import error_response

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    """Build the wiki app and compile its templates.

    Raises TemplateLoadError when a template is missing or broken, and
    config.ConfigError for a bad config.toml. Nothing here exits the
    process.
    """
    settings = config.load_settings()
    if overrides:
        settings.update(overrides)

    # a configured template_dir is searched before the blueprint's bundled templates
    app = Flask(__name__, template_folder=settings["TEMPLATE_DIR"])
    app.config.update(settings)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    app.register_blueprint(wiki_bp)

    app.add_template_filter(markdown_filter, "markdown")
    app.extensions[TEMPLATES_KEY] = load_templates(app)

    os.makedirs(app.config["PAGES_DIR"], exist_ok=True)

    @app.errorhandler(404)
    def page_not_found(e):
        return error_response("404 page not found", status=404)

    @app.errorhandler(413)
    def request_entity_too_large(e):
        return error_response("request body too large", status=413)

    return app


def check_listen(host, port):
    """Raise OSError if host:port cannot be bound.

    Werkzeug exits on its own when binding fails, so this runs first to
    report the failure through the log.
    """
    family, socktype, proto, _, address = socket.getaddrinfo(
        host, port, type=socket.SOCK_STREAM
    )[0]
    with socket.socket(family, socktype, proto) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(address)


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        app = create_app()
    except (TemplateLoadError, config.ConfigError) as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)

    host, port = app.config["HOST"], app.config["PORT"]
    try:
        check_listen(host, port)
    except OSError as e:
        logger.critical(f"Could not listen on {host}:{port}: {e}")
        sys.exit(1)

    logger.info(f"Serving pages from {os.path.abspath(app.config['PAGES_DIR'])}")
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
