import logging
from fastapi import FastAPI

logger = logging.getLogger(__name__)

# /metrics is served only when the "metrics" extra is installed.
try:
    from prometheus_fastapi_instrumentator import Instrumentator
except ImportError:
    Instrumentator = None


def setup_metrics(app: FastAPI) -> bool:
    if Instrumentator is None:
        logger.info("prometheus-fastapi-instrumentator not installed, /metrics disabled")
        return False
    Instrumentator(excluded_handlers=["/metrics", "/healthz"]).instrument(app).expose(
        app, include_in_schema=False, should_gzip=True
    )
    return True
