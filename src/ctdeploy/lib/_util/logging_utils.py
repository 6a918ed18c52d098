"""Utility functions for logging."""

import shlex


def _log_debug(message: str) -> None:
    """Append a timestamped debug line to the ctdeploy log.

    Writes to ``state_root()/ctdeploy.log``. Best effort: an unwritable
    state directory must never turn a successful deployment into a failure,
    so any IO error is ignored.
    """
    try:
        import time

        from ..core.paths import state_root

        log_path = state_root() / "ctdeploy.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass


def log_command(cmd: list[str], returncode: int | None, cwd: object = None) -> None:
    """Record a delegated command and its exit status.

    Only argv is logged. Environment values (``PRIVATE_KEY``) never reach
    the log.
    """
    status = "not found" if returncode is None else f"exit {returncode}"
    where = f" (cwd: {cwd})" if cwd is not None else ""
    _log_debug(f"$ {shlex.join(cmd)}{where} -> {status}")
