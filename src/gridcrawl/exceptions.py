class GridcrawlError(Exception):
    """Base exception for the gridcrawl project."""


class ConfigError(GridcrawlError):
    """Raised when dungeon generation configuration is invalid."""
