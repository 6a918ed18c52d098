# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Subprocess wrappers for the delegated npm / truffle toolchain.

Every call is synchronous and fail-fast: a non-zero exit raises
``ToolFailed`` carrying the tool's own exit status, and nothing is retried
or rolled back.
"""

import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import IO

from ._util.logging_utils import log_command
from .core.project import ProjectSettings

# Exit status a POSIX shell uses for "command not found"
COMMAND_NOT_FOUND = 127


class ToolFailed(Exception):
    """A delegated command exited non-zero or could not be started."""

    def __init__(self, cmd: list[str], returncode: int, reason: str) -> None:
        super().__init__(reason)
        self.cmd = cmd
        self.returncode = returncode
        self.reason = reason

    @property
    def command_line(self) -> str:
        return shlex.join(self.cmd)


def _exit_status(returncode: int) -> int:
    """Map a subprocess return code to a shell-style exit status."""
    if returncode < 0:
        # killed by signal N -> 128 + N
        return 128 - returncode
    return returncode


def run_tool(
    cmd: list[str],
    *,
    cwd: Path,
    env_overrides: dict[str, str] | None = None,
    stdout: IO[str] | None = None,
) -> None:
    """Run *cmd* in *cwd* and wait for it.

    Output streams go straight to the terminal unless *stdout* is given.
    *env_overrides* are layered over the current environment.
    """
    env = None
    if env_overrides:
        env = {**os.environ, **env_overrides}
    # status lines printed so far must reach the terminal before the tool writes
    sys.stdout.flush()
    try:
        subprocess.run(cmd, cwd=str(cwd), env=env, stdout=stdout, check=True)
    except FileNotFoundError:
        log_command(cmd, None, cwd)
        raise ToolFailed(cmd, COMMAND_NOT_FOUND, f"{cmd[0]} not found; please install it")
    except subprocess.CalledProcessError as e:
        status = _exit_status(e.returncode)
        log_command(cmd, e.returncode, cwd)
        raise ToolFailed(cmd, status, f"Command failed with exit code {status}")
    log_command(cmd, 0, cwd)


def npm_run(settings: ProjectSettings, script: str) -> None:
    """Run a named script from the project's package.json."""
    run_tool([settings.toolchain.npm, "run", script], cwd=settings.root)


def truffle_migrate(settings: ProjectSettings, network: str, private_key: str) -> None:
    """Run the Truffle migrations against *network*.

    The key travels in the child environment only, never on the command line.
    """
    run_tool(
        [settings.toolchain.truffle, "migrate", "--network", network],
        cwd=settings.root,
        env_overrides={"PRIVATE_KEY": private_key},
    )


def flattener_available(settings: ProjectSettings) -> bool:
    return shutil.which(settings.toolchain.flattener) is not None


def install_flattener(settings: ProjectSettings) -> None:
    run_tool(
        [settings.toolchain.npm, "install", "-g", settings.toolchain.flattener],
        cwd=settings.root,
    )


def flatten_to_file(settings: ProjectSettings) -> Path:
    """Flatten the contract source into the configured output file.

    The output file is truncated before the flattener starts, as a shell
    redirect would; a failed run leaves whatever was written so far.
    """
    output = settings.flattened_path
    cmd = [settings.toolchain.npx, settings.toolchain.flattener, settings.contract.source]
    with open(output, "w", encoding="utf-8") as f:
        run_tool(cmd, cwd=settings.root, stdout=f)
    return output
