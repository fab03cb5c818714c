# backend/quickverify/verifier/phone_engine.py
import re
from typing import Optional

MIN_DIGITS = 7
MAX_DIGITS = 15

# Checked against the trimmed input in this order, first hit wins
REGION_PREFIXES = (
    ("+1", "North American format detected."),
    ("+44", "UK format detected."),
    ("+61", "Australia format detected."),
)

# Country code + leading digits of ranges handed out by virtual number providers
VOIP_PREFIXES = ("1769", "1649", "4474", "4475")

NON_DIGIT = re.compile(r"\D", re.ASCII)

NO_PHONE = "No phone provided"
TOO_SHORT = "Too short to be a valid phone number."
TOO_LONG = "Number looks too long to be valid."
VOIP_MATCH = "Number matches known virtual/VoIP prefixes — could be disposable/VoIP."
PLAUSIBLE = "Phone format looks plausible. Ownership cannot be confirmed without OTP."


def digits_only(phone: str) -> str:
    return NON_DIGIT.sub("", phone)


def check_phone(phone: Optional[str]) -> str:
    """
    Local plausibility check, no network.

    Region prefixes are tested before VoIP prefixes, so "+1769..." reports
    North America rather than VoIP.
    """
    if not phone:
        return NO_PHONE

    digits = digits_only(phone)
    if len(digits) < MIN_DIGITS:
        return TOO_SHORT
    if len(digits) > MAX_DIGITS:
        return TOO_LONG

    trimmed = phone.strip()
    for prefix, verdict in REGION_PREFIXES:
        if trimmed.startswith(prefix):
            return verdict

    if digits.startswith(VOIP_PREFIXES):
        return VOIP_MATCH

    return PLAUSIBLE
