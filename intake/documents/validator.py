"""Turns parsed AI responses into typed document fields."""

import re
from typing import Any

from intake.documents.exceptions import ClassificationError, ExtractionValidationError
from intake.documents.models import (
    AadhaarFields,
    DocumentCategory,
    EducationFields,
    PanFields,
)

_PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
_AADHAAR_DIGITS = 12


def build_category(data: dict[str, Any]) -> DocumentCategory:
    """Read the ``category`` label.

    Raises:
        ClassificationError: if the label is missing or not a string.
    """
    raw = data.get("category")
    if not isinstance(raw, str) or not raw.strip():
        raise ClassificationError("Classifier response is missing 'category'")
    return DocumentCategory.parse(raw)


def build_pan_fields(data: dict[str, Any]) -> PanFields:
    full_name = _require_text(data, "full_name")
    tax_id = re.sub(r"\s", "", _require_text(data, "tax_id")).upper()
    if not _PAN_PATTERN.match(tax_id):
        raise ExtractionValidationError(f"'tax_id' is not a valid PAN number: {tax_id!r}")
    return PanFields(full_name=full_name, tax_id=tax_id)


def build_aadhaar_fields(data: dict[str, Any]) -> AadhaarFields:
    full_name = _require_text(data, "full_name")
    digits = re.sub(r"\D", "", _require_text(data, "national_id"))
    if len(digits) != _AADHAAR_DIGITS:
        raise ExtractionValidationError(
            f"'national_id' must have {_AADHAAR_DIGITS} digits, got {len(digits)}"
        )
    return AadhaarFields(full_name=full_name, national_id=digits)


def build_education_fields(data: dict[str, Any]) -> EducationFields:
    institute = _require_text(data, "institute")
    document_kind = data.get("document_kind")
    if not isinstance(document_kind, str):
        document_kind = ""
    return EducationFields(institute=institute, document_kind=document_kind.strip())


def _require_text(data: dict[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ExtractionValidationError(
            "Could not extract all required fields from the document: "
            f"'{field}' is missing"
        )
    return " ".join(value.split())
