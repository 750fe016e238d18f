"""
fibtree version information
"""

__version__ = "0.3.0"


def get_version() -> str:
    """Return the installed fibtree version"""
    return __version__
