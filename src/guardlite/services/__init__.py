"""Service providers used by the front ends."""

from .mafile_loader import MafileLoader, MafileReadError

__all__ = ["MafileLoader", "MafileReadError"]
