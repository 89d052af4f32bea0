# config.py
from __future__ import annotations

import runpy
from dataclasses import dataclass, replace
from pathlib import Path

from .model import SubmitConfig
from .runner import BatchError


# The constants the cluster script has always used
DEFAULT_CONFIG = SubmitConfig()


@dataclass
class ConfigError(BatchError):
    path: str
    detail: str

    def __str__(self) -> str:
        return f"Invalid config {self.path}: {self.detail}"


def load_config(path: str | Path) -> SubmitConfig:
    """
    Load a config from a python file path.

    The file must define either:
      - config() -> SubmitConfig
      - CONFIG = SubmitConfig(...)

    Returns:
      SubmitConfig
    """
    cfg_path = Path(path).expanduser().resolve()
    if not cfg_path.exists():
        raise ConfigError(path=str(path), detail="file not found")
    if cfg_path.suffix != ".py":
        raise ConfigError(path=str(path), detail=f"must be a .py file, got: {cfg_path.name}")

    module_name = f"boltzbatch_config_{cfg_path.stem}"
    try:
        globals_dict = runpy.run_path(str(cfg_path), run_name=module_name)
    except Exception as e:
        raise ConfigError(path=str(path), detail=f"{type(e).__name__}: {e}") from e

    cfg = None
    if "config" in globals_dict and callable(globals_dict["config"]):
        cfg = globals_dict["config"]()
    elif "CONFIG" in globals_dict:
        cfg = globals_dict["CONFIG"]

    if not isinstance(cfg, SubmitConfig):
        raise ConfigError(
            path=str(path),
            detail="define config() -> SubmitConfig or CONFIG = SubmitConfig(...)",
        )

    return cfg


def with_overrides(config: SubmitConfig, **overrides) -> SubmitConfig:
    """Return a copy with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return config
    return replace(config, **changes)
