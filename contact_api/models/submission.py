"""
Contact form payload and stored submission models
"""
import math
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

# User-facing messages (the contact page is in Spanish)
FULL_NAME_REQUIRED = "El nombre completo es requerido"
PHONE_INVALID = "Por favor, introduce un número de teléfono válido de 9 dígitos"
PHONE_REQUIRED = "El nombre y el teléfono son campos obligatorios"
EMAIL_INVALID = "El correo electrónico no es válido"
FIELD_INVALID = "El valor del campo no es válido"
BODY_INVALID = "El formato de la solicitud no es válido"
SUBMISSION_ACCEPTED = "¡Solicitud enviada con éxito! Nos pondremos en contacto contigo pronto."

PHONE_PATTERN = re.compile(r"[0-9]{9}")
WHITESPACE = re.compile(r"\s+")
CHECKBOX_TRUE_VALUES = ("true", "1", "on", "yes")

OPTIONAL_TEXT_FIELDS = ("email", "address", "city", "postalCode", "propertyType", "atticType")


def _is_strict(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("strict"))


class SubmissionStatus(str, Enum):
    NEW = "new"


class ContactForm(BaseModel):
    """
    Normalized contact form payload.

    Fields are declared in validation order; callers that want fail-fast
    behaviour report the first error only.
    """
    model_config = ConfigDict(extra="ignore")

    fullName: str = Field(default=None, validate_default=True)
    phone: str = Field(default=None, validate_default=True)
    email: str = ""
    address: str = ""
    city: str = ""
    postalCode: str = ""
    propertyType: str = ""
    atticType: str = ""
    privacyAccepted: bool = False

    @field_validator("fullName", mode="before")
    @classmethod
    def validate_full_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("full_name_required", FULL_NAME_REQUIRED)
        return v.strip()

    @field_validator("phone", mode="before")
    @classmethod
    def validate_phone(cls, v: Any, info: ValidationInfo) -> str:
        if _is_strict(info) and (v is None or (isinstance(v, str) and not v.strip())):
            raise PydanticCustomError("phone_required", PHONE_REQUIRED)
        if not isinstance(v, str):
            raise PydanticCustomError("phone_invalid", PHONE_INVALID)
        digits = WHITESPACE.sub("", v)
        if not PHONE_PATTERN.fullmatch(digits):
            raise PydanticCustomError("phone_invalid", PHONE_INVALID)
        return digits

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def normalize_text(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, bool):
            raise PydanticCustomError("field_invalid", FIELD_INVALID)
        if isinstance(v, int) or (isinstance(v, float) and math.isfinite(v)):
            return str(v)
        if not isinstance(v, str):
            raise PydanticCustomError("field_invalid", FIELD_INVALID)
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str, info: ValidationInfo) -> str:
        if v and _is_strict(info):
            # Bare addresses only: "Name <addr>" would otherwise be accepted
            if WHITESPACE.search(v) or "<" in v or ">" in v:
                raise PydanticCustomError("email_invalid", EMAIL_INVALID)
            try:
                validate_email(v)
            except ValueError:
                raise PydanticCustomError("email_invalid", EMAIL_INVALID)
        return v

    @field_validator("privacyAccepted", mode="before")
    @classmethod
    def normalize_checkbox(cls, v: Any) -> bool:
        # HTML checkboxes post "on"; JSON clients send booleans
        if isinstance(v, str):
            return v.strip().lower() in CHECKBOX_TRUE_VALUES
        return bool(v)


class Submission(BaseModel):
    """A contact form as persisted in the submissions file"""
    model_config = ConfigDict(use_enum_values=True)

    id: int
    fullName: str
    phone: str
    email: str = ""
    address: str = ""
    city: str = ""
    postalCode: str = ""
    propertyType: str = ""
    atticType: str = ""
    privacyAccepted: bool = False
    submittedAt: str
    status: SubmissionStatus = SubmissionStatus.NEW
    source: str = "website-form"

    @classmethod
    def from_form(cls, form: ContactForm, submission_id: int, submitted_at: str) -> "Submission":
        return cls(id=submission_id, submittedAt=submitted_at, **form.model_dump())
