"""Location of the default templates bundled into the flatwiki package."""

from importlib.resources import files
from pathlib import Path


def get_templates_dir() -> Path:
    """Return path to the bundled templates.

    Returns:
        Path to the directory containing the default layout and views.

    Raises:
        FileNotFoundError: If the templates are not bundled.
    """
    templates = files("flatwiki").joinpath("templates")
    if not templates.is_dir():
        msg = "Bundled templates not found. Reinstall flatwiki with its package data."
        raise FileNotFoundError(msg)
    return Path(str(templates))
