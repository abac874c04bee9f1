class CitiesBrowserError(Exception):
    """Base exception for all cities_browser errors"""
    pass


class ConfigError(CitiesBrowserError):
    """Missing or inconsistent global.json"""
    pass


class LoadError(CitiesBrowserError):
    """
    The dataset source is unreadable or malformed
    (missing required columns, empty file, parser failure)
    """
    pass


class CoordinateParseError(CitiesBrowserError, ValueError):
    """A GeoLocation string could not be split into a (lat, lng) pair"""
    pass


class EmptySelectionError(CitiesBrowserError):
    """
    No records match the current category/measure/range combination.
    Not fatal: renderers show an empty map/table instead.
    """
    pass
