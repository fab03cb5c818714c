# backend/quickverify/verifier/dns_engine.py
import logging
from typing import Any, List

import httpx

from ..config import settings
from ..http import cache_hint, encode_component

logger = logging.getLogger("quickverify.dns")


async def resolve_mx_for_domain(client: httpx.AsyncClient, domain: str) -> List[Any]:
    """
    Ask the DNS-over-HTTPS resolver for MX records of ``domain``.

    Returns the resolver's ``Answer`` list, or [] when it has none (or the
    document is not a JSON object). Transport and decode errors propagate so
    the caller can report them.
    """
    if not domain:
        return []

    # name is pre-encoded so the resolver sees exactly what a browser would send
    url = f"{settings.DOH_URL}?name={encode_component(domain)}&type=MX"
    resp = await client.get(url, headers=cache_hint())
    data = resp.json()

    answers = data.get("Answer") if isinstance(data, dict) else None
    if not isinstance(answers, list):
        return []
    logger.debug("MX lookup domain=%s answers=%d", domain, len(answers))
    return answers
