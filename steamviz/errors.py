class SteamVizError(Exception):
    """Base error for the dashboard backend."""


class DatasetLoadError(SteamVizError):
    """The releases file could not be read."""


class CoordinatorNotReady(SteamVizError):
    """A selection was attempted before any dataset finished loading."""
