"""Config discovery for dagedit: YAML files, pyproject.toml, and env vars."""

import logging
import os
import re
import tomllib
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DagEditConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DAGEDIT_CONFIG"
PROJECT_CONFIG = "dagedit.yaml"
PYPROJECT_TABLE = ("tool", "dagedit")


def load_config(path: str | os.PathLike[str] | None = None) -> DagEditConfig:
    """Load the dagedit config.

    Resolution order: *path* > ``$DAGEDIT_CONFIG`` > ``./dagedit.yaml`` >
    ``[tool.dagedit]`` in ``./pyproject.toml`` > ``~/.dagedit/config.yaml`` >
    defaults. A file named explicitly (argument or env var) must exist.
    Relative ``store.path`` values are resolved against the directory of
    the file that set them.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        cfg_path = Path(explicit)
        if not cfg_path.is_file():
            raise ValueError(f"Config file not found: {cfg_path}")
        raw = _read_yaml(cfg_path)
        return _build(raw or {}, cfg_path)

    local = Path.cwd() / PROJECT_CONFIG
    if local.is_file():
        raw = _read_yaml(local)
        if raw is not None:
            return _build(raw, local)

    pyproject = Path.cwd() / "pyproject.toml"
    if pyproject.is_file():
        raw = _read_pyproject(pyproject)
        if raw is not None:
            return _build(raw, pyproject)

    user = Path.home() / ".dagedit" / "config.yaml"
    if user.is_file():
        raw = _read_yaml(user)
        if raw is not None:
            return _build(raw, user)

    return DagEditConfig()


def _read_yaml(path: Path) -> dict | None:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    return raw


def _read_pyproject(path: Path) -> dict | None:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e
    for key in PYPROJECT_TABLE:
        data = data.get(key)
        if not isinstance(data, dict):
            return None
    return data


def _build(raw: dict, source: Path) -> DagEditConfig:
    try:
        config = DagEditConfig(**_expand_env_vars(raw))
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid config in {source}: {e}") from e

    store_path = Path(config.store.path)
    if not store_path.is_absolute():
        resolved = (source.parent / store_path).resolve()
        config = config.model_copy(
            update={"store": config.store.model_copy(update={"path": str(resolved)})}
        )
    logger.debug("loaded config from %s", source)
    return config


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for a new dagedit.yaml
DEFAULT_CONFIG_TEMPLATE = """\
# dagedit.yaml

editor:
  evict_superseded: true     # drop replaced node versions from the staging overlay

store:
  backend: "memory"          # memory | sqlite
  path: ".dagedit/nodes.db"  # sqlite only, relative to this file
"""
