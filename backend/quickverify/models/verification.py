# backend/quickverify/models/verification.py
import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class VerificationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(None, alias="imageUrl")
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_body(cls, raw: bytes) -> "VerificationRequest":
        """
        Best-effort parse of a request body. Anything that is not a JSON
        object becomes an empty request, and non-string fields count as absent.
        """
        try:
            data: Any = json.loads(raw) if raw else {}
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        return cls(
            image_url=_string_or_none(data.get("imageUrl")),
            email=_string_or_none(data.get("email")),
            phone=_string_or_none(data.get("phone")),
        )


class VerificationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_check: str = Field(..., alias="imageCheck")
    email_check: str = Field(..., alias="emailCheck")
    phone_check: str = Field(..., alias="phoneCheck")


def _string_or_none(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None
