from intake.documents.models import (
    AadhaarFields,
    DocumentCategory,
    EducationFields,
    ExtractedFields,
    PanFields,
)
from intake.logging.logger import Log
from intake.pipeline.models import ProfileDraft, ProfileUpdate


class Aggregator:
    """Merges extracted fields into the run's ProfileDraft.

    PAN documents are the authoritative identity source: their name and PAN
    number always overwrite what is recorded. Every other document only fills
    ``name`` and ``institute`` while they are still empty, so the first writer
    wins among them.
    """

    def __init__(self) -> None:
        self._draft = ProfileDraft()

    def merge(self, category: DocumentCategory, fields: ExtractedFields) -> None:
        name, tax_id, institute = self._partial(fields)
        if category is DocumentCategory.PAN:
            if name:
                self._draft.name = name
            if tax_id:
                self._draft.tax_id = tax_id
        else:
            if name and not self._draft.name:
                self._draft.name = name
            if institute and not self._draft.institute:
                self._draft.institute = institute
        Log.debug(f"Profile draft after {category.value} merge: {self._draft}")

    def snapshot(self) -> ProfileUpdate:
        return self._draft.snapshot()

    @staticmethod
    def _partial(fields: ExtractedFields) -> tuple[str | None, str | None, str | None]:
        if isinstance(fields, PanFields):
            return fields.full_name, fields.tax_id, None
        if isinstance(fields, AadhaarFields):
            return fields.full_name, None, None
        if isinstance(fields, EducationFields):
            return None, None, fields.institute
        raise TypeError(f"Unsupported extracted fields: {type(fields).__name__}")
