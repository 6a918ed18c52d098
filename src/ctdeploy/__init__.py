"""ctdeploy package.

Modules:
- ctdeploy.cli: CLI entry point package (ctdeploy)
- ctdeploy.lib.core: Paths, layered configuration, typed project settings
- ctdeploy.lib.toolchain: npm / truffle / truffle-flattener subprocess wrappers
- ctdeploy.lib.artifacts: Build artifact and flattened source inspection
- ctdeploy.lib._util: Internal helpers (ANSI, config stack, logging, emoji)
- ctdeploy.ui_utils: Terminal status printers
"""

__all__ = [
    "cli",
    "lib",
    "ui_utils",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("ctdeploy")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
