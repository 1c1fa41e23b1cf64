"""groupgrid - proximity grouping service for players on a bounded surface."""

from groupgrid.__version__ import __version__

__all__ = ["__version__"]
