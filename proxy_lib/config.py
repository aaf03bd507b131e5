"""Proxy configuration.

Settings can be built in code or loaded from a YAML file such as:

    catch_all_read: declared
    create_mode: skip_existing
    log_level: debug
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config/proxy.yml")


class ProxyConfig(BaseModel):
    """Behaviour switches for the ambiguous corners of the accessor.

    - `catch_all_read`: with ``"universal"`` a record overriding
      ``__getattr__`` reports every field key as present; ``"declared"``
      ignores the hook and only declared or ad hoc fields exist.
    - `create_mode`: with ``"skip_existing"`` `create` never touches an
      existing key; ``"initialise_missing"`` writes the value when the key
      exists but is not initialised yet.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    catch_all_read: Literal["universal", "declared"] = "universal"
    create_mode: Literal["skip_existing", "initialise_missing"] = "initialise_missing"
    log_level: Optional[str] = None


def load_yaml_file(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_proxy_config(path: Optional[Union[str, Path]] = None) -> ProxyConfig:
    """Load `ProxyConfig` from YAML, falling back to defaults when the file is absent.

    Invalid values raise `pydantic.ValidationError`.
    """
    cfg_path = Path(path) if path is not None else CONFIG_PATH
    data = load_yaml_file(cfg_path)
    logger.debug("Loaded proxy config from %s: %s", cfg_path, data)
    return ProxyConfig(**data)
