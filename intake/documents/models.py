from dataclasses import dataclass
from enum import Enum


class DocumentCategory(str, Enum):
    """Document types the classifier can assign."""

    PAN = "PAN"
    AADHAAR = "AADHAAR"
    ADMISSION = "ADMISSION"
    MARKSHEET = "MARKSHEET"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str) -> "DocumentCategory":
        """Map a provider label onto a category; anything unrecognized is UNKNOWN."""
        cleaned = raw.strip().upper()
        for category in cls:
            if category.value.upper() == cleaned:
                return category
        return cls.UNKNOWN


class MediaType:
    PDF = "application/pdf"
    PNG = "image/png"
    JPEG = "image/jpeg"

    IMAGES = frozenset({PNG, JPEG})
    SUPPORTED = frozenset({PDF, PNG, JPEG})


@dataclass(frozen=True)
class PanFields:
    """Fields read from a PAN card."""

    full_name: str
    tax_id: str

    def as_display(self) -> dict[str, str]:
        return {"Name": self.full_name, "PAN": self.tax_id}


@dataclass(frozen=True)
class AadhaarFields:
    """Fields read from an Aadhaar card."""

    full_name: str
    national_id: str

    def as_display(self) -> dict[str, str]:
        return {"Name": self.full_name, "Aadhaar": self.national_id}


@dataclass(frozen=True)
class EducationFields:
    """Fields read from an admission letter or marksheet."""

    institute: str
    document_kind: str

    def as_display(self) -> dict[str, str]:
        return {"Institute": self.institute, "Type": self.document_kind}


ExtractedFields = PanFields | AadhaarFields | EducationFields
