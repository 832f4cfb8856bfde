"""Top-level package for the wallpaper layout engine.

Provides subpackages:
- wallpaper_layout.core – immutable value types (images, canvas, placements)
- wallpaper_layout.layout – classification, placement strategies, validation
- wallpaper_layout.images – descriptor acquisition from image files
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("wallpaper-layout")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The wallpaper-layout authors"
__all__: list[str] = ["__version__"]
