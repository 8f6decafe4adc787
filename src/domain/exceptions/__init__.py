from .isochrone import DatasetError, EngineNotReady, IsochroneError

__all__ = ["DatasetError", "EngineNotReady", "IsochroneError"]
