"""In-memory service tracking counter exposed over HTTP."""
from service_tracker.constants import VERSION as __version__
from service_tracker.tracker import ServiceTracker

__all__ = ["ServiceTracker", "__version__"]
