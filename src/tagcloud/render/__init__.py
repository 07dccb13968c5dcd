"""Debug rendering of cloud layouts."""

from .drawer import CloudDrawer

__all__ = ["CloudDrawer"]
