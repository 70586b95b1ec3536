import json
import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from service_tracker.tracker import ServiceTracker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tracking"])


def _get_tracker(request: Request) -> ServiceTracker:
    tracker = getattr(request.app.state, "tracker", None)
    if tracker is None:
        raise HTTPException(status_code=503, detail="Tracker not available")
    return tracker


def _require_service_name(service: str) -> str:
    # the route already guarantees a non-empty segment; reject whitespace-only names
    if not service.strip():
        raise HTTPException(status_code=400, detail="service name must not be blank")
    return service


@router.post("/track/{service}", status_code=204)
def track_service(request: Request, service: str):
    """Record one occurrence of ``service``. Returns 204 with an empty body."""
    name = _require_service_name(service)
    _get_tracker(request).increment(name)
    return Response(status_code=204)


@router.get("/count/{service}")
def get_service_count(request: Request, service: str):
    """Return ``{"count": n}`` for ``service``; 0 if it was never tracked.

    If the body cannot be encoded the error text is returned with status 500.
    """
    name = _require_service_name(service)
    count = _get_tracker(request).get_count(name)
    try:
        body = json.dumps({"count": count}, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode count for {name!r}: {e}", exc_info=True)
        return Response(content=str(e), status_code=500, media_type="text/plain")
    logger.debug(f"Count for {name!r}: {count}")
    return Response(content=body, media_type="application/json")
