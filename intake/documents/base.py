from abc import ABC, abstractmethod

from intake.documents.models import (
    AadhaarFields,
    DocumentCategory,
    EducationFields,
    PanFields,
)


class BaseClassifier(ABC):
    """Contract for document classifiers."""

    @abstractmethod
    async def classify(
        self,
        payload: bytes,
        media_type: str,
        *,
        file_name: str | None = None,
    ) -> DocumentCategory:
        """Decide which kind of document the payload holds.

        Args:
            payload: Raw file content.
            media_type: Declared media type of the file.
            file_name: Optional display name, passed on as an extra hint.

        Returns:
            The category; ``DocumentCategory.UNKNOWN`` when the document is
            readable but of no supported kind.

        Raises:
            ClassificationError: when no category can be determined.
        """


class BaseExtractor(ABC):
    """Contract for the category-specific field extractors."""

    @abstractmethod
    async def extract_pan(self, payload: bytes, media_type: str) -> PanFields:
        """Read holder name and PAN number. Raises ExtractionError."""

    @abstractmethod
    async def extract_aadhaar(self, payload: bytes, media_type: str) -> AadhaarFields:
        """Read holder name and Aadhaar number. Raises ExtractionError."""

    @abstractmethod
    async def extract_education(self, payload: bytes, media_type: str) -> EducationFields:
        """Read institute name and document kind. Raises ExtractionError."""
