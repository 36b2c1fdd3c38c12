"""Process-wide httpx client used for outbound calls to the detection model."""
import logging
from typing import Optional

import httpx

from ..core.config import get_settings

logger = logging.getLogger(__name__)

USER_AGENT = "transformer-inspection-backend/1.0"

_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Return the pooled AsyncClient, creating it on first use.

    The default timeout comes from ROBOFLOW_TIMEOUT_SECONDS; image uploads are
    large, so the pool is kept small and connections are reused.
    """
    global _shared_client

    if _shared_client is None:
        settings = get_settings()
        _shared_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.roboflow_timeout_seconds, connect=10.0),
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=20),
            headers={"User-Agent": USER_AGENT},
            http2=True,
        )
        logger.info(f"Created shared HTTP client (timeout {settings.roboflow_timeout_seconds}s)")

    return _shared_client


async def close_shared_http_client() -> None:
    global _shared_client

    if _shared_client is None:
        return
    await _shared_client.aclose()
    _shared_client = None
    logger.info("Closed shared HTTP client")
