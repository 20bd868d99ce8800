"""Exception hierarchy shared by the terrain and mining modules."""

from __future__ import annotations


class TunnelgridError(Exception):
    """Base class for all errors raised by tunnelgrid."""


class OutOfBoundsError(TunnelgridError, IndexError):
    """A grid read or write was requested outside ``[0, side)``."""


class InvalidConfigurationError(TunnelgridError, ValueError):
    """Generation parameters cannot produce a valid session."""
