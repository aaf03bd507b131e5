from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from proxy_lib.config import CONFIG_PATH, load_proxy_config


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for scripts embedding the proxy.

    The level comes from `log_level` in the proxy YAML config and defaults
    to WARNING. Returns a module logger for the caller.
    """
    default_level = logging.WARNING

    cfg_path = config_path or CONFIG_PATH
    try:
        lvl = load_proxy_config(cfg_path).log_level
        if lvl:
            default_level = getattr(logging, lvl.upper(), logging.WARNING)
    except (OSError, ValueError, ValidationError):
        # unreadable config falls back to the default level
        default_level = logging.WARNING

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=default_level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.debug("Log level set to %s", logging.getLevelName(default_level))
    return logger
