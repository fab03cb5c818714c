# backend/quickverify/routers/verify.py
import asyncio
import json
import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..http import get_http_client
from ..models.verification import VerificationRequest, VerificationResult
from ..verifier import check_email, check_image, check_phone

logger = logging.getLogger("quickverify.verify")

router = APIRouter()

# Browser frontends on any origin may call this endpoint
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
ERROR_CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


async def run_checks(client: httpx.AsyncClient, payload: VerificationRequest) -> VerificationResult:
    # network checks overlap, phone check is local
    image_check, email_check = await asyncio.gather(
        check_image(client, payload.image_url),
        check_email(client, payload.email),
    )
    return VerificationResult(
        image_check=image_check,
        email_check=email_check,
        phone_check=check_phone(payload.phone),
    )


# ---------------------------------------------------
# POST /api/verify
# ---------------------------------------------------
# OPTIONS is not routed here, preflight is left to the host.
@router.post("/verify")
async def verify(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        payload = VerificationRequest.from_body(await request.body())
        logger.debug(
            "verify request image=%s email=%s phone=%s",
            bool(payload.image_url), bool(payload.email), bool(payload.phone),
        )
        result = await run_checks(client, payload)
        return PrettyJSONResponse(
            result.model_dump(by_alias=True),
            status_code=200,
            headers=CORS_HEADERS,
        )
    except Exception as e:
        logger.exception("verify failed: %s", e)
        return JSONResponse(
            {"error": str(e)},
            status_code=500,
            headers=ERROR_CORS_HEADERS,
        )
