# backend/quickverify/verifier/__init__.py

from .syntax_engine import (
    email_domain,
    is_syntax_valid,
)

from .disposable import is_disposable
from .dns_engine import resolve_mx_for_domain
from .email_engine import check_email
from .image_engine import check_image, classify_results_page
from .phone_engine import check_phone

__all__ = [
    "email_domain",
    "is_syntax_valid",
    "is_disposable",
    "resolve_mx_for_domain",
    "check_email",
    "check_image",
    "classify_results_page",
    "check_phone",
]
