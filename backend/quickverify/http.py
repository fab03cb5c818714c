# backend/quickverify/http.py
from typing import AsyncIterator, Dict, Optional
from urllib.parse import quote

import httpx

from .config import settings


def encode_component(value: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(value, safe="-_.!~*'()")


def cache_hint(ttl: Optional[int] = None) -> Dict[str, str]:
    """
    Headers asking whatever sits between us and the upstream to keep the
    response for ``ttl`` seconds. Nothing is cached in-process.
    """
    if ttl is None:
        ttl = settings.CACHE_TTL
    return {"Cache-Control": f"max-age={int(ttl)}"}


def build_http_client(**kwargs) -> httpx.AsyncClient:
    kwargs.setdefault("timeout", settings.HTTP_TIMEOUT)
    kwargs.setdefault("follow_redirects", True)
    return httpx.AsyncClient(**kwargs)


# ---------------------------------------------------------
# FastAPI dependency (one client per request)
# ---------------------------------------------------------
async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with build_http_client() as client:
        yield client
