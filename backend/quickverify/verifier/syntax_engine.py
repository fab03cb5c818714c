# backend/quickverify/verifier/syntax_engine.py
import re

# RFC-light regex (practical): one "@", no whitespace, a dot in the domain
EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

def is_syntax_valid(addr: str) -> bool:
    if not addr or "@" not in addr:
        return False
    return EMAIL_REGEX.fullmatch(addr) is not None

def email_domain(addr: str) -> str:
    if not addr or "@" not in addr:
        return ""
    return addr.split("@")[1].lower()
