"""Personal GitHub contribution statistics for a user within an organization."""

__version__ = "0.1.0"
