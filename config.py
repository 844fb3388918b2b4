import logging
import os

import toml

CONFIG_FILE = "config.toml"


class ConfigError(Exception):
    pass


def load_settings(path=CONFIG_FILE):
    try:
        settings = toml.load(path) if os.path.exists(path) else {}
    except toml.TomlDecodeError as e:
        raise ConfigError(f"malformed {path}: {e}") from e

    try:
        port = int(settings.get("port", 8080))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid port {settings['port']!r}") from e

    log_level = settings.get("log_level", "INFO")
    if not isinstance(log_level, str) or not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ConfigError(f"invalid log_level {log_level!r}")

    return {
        "HOST": settings.get("host", "0.0.0.0"),
        "PORT": port,
        "PAGES_DIR": settings.get("pages_dir", "."),
        # None serves the templates bundled with the wiki blueprint
        "TEMPLATE_DIR": settings.get("template_dir"),
        "RENDER_MARKDOWN": settings.get("render_markdown", False),
        "SANITIZE_ERRORS": settings.get("sanitize_errors", False),
        # None means no limit on request bodies
        "MAX_CONTENT_LENGTH": settings.get("max_content_length"),
        "MAX_FORM_MEMORY_SIZE": settings.get("max_content_length"),
        "LOG_LEVEL": log_level.upper(),
    }
