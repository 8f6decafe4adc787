class IsochroneError(Exception):
    """Base exception for isochrone engine failures."""


class DatasetError(IsochroneError):
    """Raised when the transit dataset is missing or malformed."""


class EngineNotReady(IsochroneError):
    """Raised when the engine is used before its dataset has been loaded."""
