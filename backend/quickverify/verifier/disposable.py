# backend/quickverify/verifier/disposable.py
# Minimal disposable provider list (extend here, checks read it as-is)
DISPOSABLE_PROVIDERS = frozenset({
    "mailinator.com", "10minutemail.com", "tempmail.com",
    "guerrillamail.com", "dispostable.com",
})

def is_disposable(domain: str) -> bool:
    if not domain:
        return False
    return domain.lower() in DISPOSABLE_PROVIDERS
