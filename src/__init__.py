"""relaudit: relationship audit over exported identity lists."""

from relaudit.version import __version__

__all__ = ["__version__"]
