"""anchorwin - Resize an application window to a fraction of the screen and anchor it"""

__version__ = "1.0.0"
__description__ = "Resize an application window to a fraction of the screen and anchor it"

__all__ = ["main", "Anchorwin", "__version__"]


def __getattr__(name: str):
    """Lazy import to avoid loading platform backends on package import.

    This allows importing anchorwin.core without python-xlib or pywin32,
    which is needed for CI/headless environments.
    """
    if name == "Anchorwin":
        from .main import Anchorwin

        return Anchorwin
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
