import os
import sys
from importlib import resources as _pkg_resources
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .._util.config_stack import ConfigScope, ConfigStack, load_yaml_scope
from .paths import PROJECT_CONFIG_NAME, config_root, project_root

# ---------- Bundled defaults ----------


def load_bundled_defaults() -> dict[str, Any]:
    """Return the defaults shipped in ``ctdeploy/resources/defaults.yml``."""
    text = (_pkg_resources.files("ctdeploy") / "resources" / "defaults.yml").read_text(
        encoding="utf-8"
    )
    return yaml.safe_load(text) or {}


# ---------- Global config ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If CTDEPLOY_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (XDG user config, /etc/ctdeploy for root)
        2) sys.prefix/etc/ctdeploy/config.yml
        3) /etc/ctdeploy/config.yml
    """
    env_file = os.environ.get("CTDEPLOY_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "ctdeploy" / "config.yml"
    etc_cfg = Path("/etc/ctdeploy/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path.

    First existing search path wins. An explicit CTDEPLOY_CONFIG_FILE is
    returned even if missing. If none exist, return the last candidate.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def project_config_path(root: Path | None = None) -> Path:
    """Return the per-project override file (``ctdeploy.yml``)."""
    return (root or project_root()) / PROJECT_CONFIG_NAME


# ---------- Resolution ----------


def build_config_stack(root: Path | None = None) -> ConfigStack:
    """Assemble defaults → global → project layers.

    Raises ``ConfigFileError`` if an existing layer cannot be parsed.
    """
    stack = ConfigStack()
    stack.push(ConfigScope("defaults", None, load_bundled_defaults()))
    stack.push(load_yaml_scope("global", global_config_path()))
    stack.push(load_yaml_scope("project", project_config_path(root)))
    return stack


def load_config(root: Path | None = None) -> dict[str, Any]:
    """Return the fully merged configuration for the project at *root*."""
    return build_config_stack(root).resolve()


def get_section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    """Return a top-level section of *cfg*, defaulting to ``{}``.

    A non-dict value (``networks: "oops"``) is treated as empty.
    """
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}
