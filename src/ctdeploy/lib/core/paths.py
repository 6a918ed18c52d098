# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config, state and the project directory."""

import getpass
import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "ctdeploy"

# Per-project override file, looked up in the project directory
PROJECT_CONFIG_NAME = "ctdeploy.yml"


def _is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def config_root() -> Path:
    """
    Base directory for the user's global configuration.

    Priority:
      1. if root   → /etc/ctdeploy
         else      → ${XDG_CONFIG_HOME:-~/.config}/ctdeploy
    """
    if _is_root():
        return Path("/etc") / APP_NAME

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. CTDEPLOY_STATE_DIR
      2. if root   → /var/lib/ctdeploy
         else      → platformdirs user data dir
    """
    env = os.getenv("CTDEPLOY_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/var/lib") / APP_NAME

    return Path(user_data_dir(APP_NAME))


def project_root() -> Path:
    """
    Directory of the Truffle project the commands operate on.

    Priority:
      1. CTDEPLOY_PROJECT_DIR
      2. current working directory
    """
    env = os.getenv("CTDEPLOY_PROJECT_DIR")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()
