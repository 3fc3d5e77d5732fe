"""Load frame schema definitions from YAML, TOML, or JSON files.

A schema file maps column names to type display names::

    # trades.yaml
    columns:
      sym: String
      price: Option[Double]
      time: Timestamp
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exc import ConfigError
from .registry import TypeRegistry
from .schema import FrameSchema

log = logging.getLogger("framebridge.config")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a configuration dict from a file, dispatched by extension.

    Supported extensions: ``.json``, ``.toml``, ``.yaml`` / ``.yml``.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == '.json':
        with open(path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: malformed JSON: {exc}") from exc
    elif suffix == '.toml':
        data = _load_toml(path)
    elif suffix in ('.yaml', '.yml'):
        data = _load_yaml(path)
    else:
        raise ValueError(
            f"Unsupported config file extension {suffix!r}. "
            "Use .json, .toml, .yaml, or .yml."
        )

    log.debug("loaded config %s", path)
    return data


def schema_from_config(
    path: str | Path,
    registry: TypeRegistry | None = None,
) -> FrameSchema:
    """Load a :class:`FrameSchema` from a config file's ``columns`` table."""
    data = load_config(path)
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    columns = data.get('columns')
    if not isinstance(columns, dict) or not columns:
        raise ConfigError(f"{path}: missing or empty 'columns' table")

    for name, type_name in columns.items():
        if not isinstance(type_name, str):
            raise ConfigError(
                f"{path}: column {name!r} must map to a type name, "
                f"got {type(type_name).__name__}"
            )

    return FrameSchema.from_display_names(columns, registry)


# ── Internal loaders ─────────────────────────────────────────────

def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML using ``tomllib`` (3.11+) or ``tomli``."""
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            raise ImportError(
                "TOML support requires Python 3.11+ (built-in tomllib) "
                "or the 'tomli' package. Install with: pip install framebridge[toml]"
            )
    with open(path, 'rb') as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: malformed TOML: {exc}") from exc


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML using ``pyyaml``."""
    try:
        import yaml
    except ModuleNotFoundError:
        raise ImportError(
            "YAML support requires the 'pyyaml' package. "
            "Install with: pip install framebridge[yaml]"
        )
    with open(path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: malformed YAML: {exc}") from exc
