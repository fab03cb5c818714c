# backend/quickverify/verifier/image_engine.py
import logging
import re
from typing import Optional

import httpx

from ..config import settings
from ..http import cache_hint, encode_component

logger = logging.getLogger("quickverify.image")

# Stock/photo sites whose names in the results page mean the image is reused
STOCK_SITES = ("shutterstock", "istock", "gettyimages", "depositphotos", "adobe")
STOCK_SITE_REGEX = re.compile("|".join(STOCK_SITES), re.IGNORECASE)

# A "big" results page with image markup counts as a reverse-search hit.
# The page's own chrome also matches, so this fires on most real responses.
MIN_RESULTS_LENGTH = 3000
IMAGE_MARKUP_REGEX = re.compile(r"img|src=|data-src", re.IGNORECASE)

NO_IMAGE = "No image provided"
STOCK_MATCH = "Similar image appears on stock/photo sites — likely reused or fake."
REVERSE_MATCH = "Similar images found online (reverse search detected matches)."
NO_MATCH = "No obvious matches found in quick reverse check."


def search_url_for(image_url: str) -> str:
    return f"{settings.IMAGE_SEARCH_URL}?q={encode_component(image_url)}&iax=images&ia=images"


def classify_results_page(html: str) -> str:
    if STOCK_SITE_REGEX.search(html):
        return STOCK_MATCH
    if len(html) > MIN_RESULTS_LENGTH and IMAGE_MARKUP_REGEX.search(html):
        return REVERSE_MATCH
    return NO_MATCH


async def check_image(client: httpx.AsyncClient, image_url: Optional[str]) -> str:
    if not image_url:
        return NO_IMAGE

    try:
        headers = {"User-Agent": settings.USER_AGENT}
        headers.update(cache_hint())
        resp = await client.get(search_url_for(image_url), headers=headers)
        html = resp.text
    except Exception as e:
        logger.warning("Image search failed for %s: %s", image_url, e)
        return f"Image search failed: {e}"

    return classify_results_page(html)
