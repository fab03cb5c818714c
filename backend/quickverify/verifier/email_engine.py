# backend/quickverify/verifier/email_engine.py
import logging
from typing import Optional

import httpx

from .disposable import is_disposable
from .dns_engine import resolve_mx_for_domain
from .syntax_engine import email_domain, is_syntax_valid

logger = logging.getLogger("quickverify.email")

NO_EMAIL = "No email provided"
INVALID_FORMAT = "Invalid email format."
DISPOSABLE_DOMAIN = "Disposable email domain detected."
HAS_MX = "Domain has MX records — likely accepts email."
NO_MX = "No MX records found — domain may not accept email (suspicious)."


async def check_email(client: httpx.AsyncClient, email: Optional[str]) -> str:
    if not email:
        return NO_EMAIL
    if not is_syntax_valid(email):
        return INVALID_FORMAT

    domain = email_domain(email)
    if is_disposable(domain):
        return DISPOSABLE_DOMAIN

    try:
        answers = await resolve_mx_for_domain(client, domain)
    except Exception as e:
        logger.warning("MX lookup failed for %s: %s", domain, e)
        return f"Email DNS check failed: {e}"

    return HAS_MX if answers else NO_MX
