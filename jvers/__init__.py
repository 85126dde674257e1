"""Library version string and version comparison helpers."""

__version__ = "2.14.1"
__all__ = ["version"]