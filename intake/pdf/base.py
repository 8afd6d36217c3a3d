from abc import ABC, abstractmethod
from typing import ClassVar


class BasePdfReader(ABC):
    """Contract for PDF text-layer readers."""

    # Name used for this reader in ``Settings.pdf_engine``.
    engine: ClassVar[str]

    @abstractmethod
    def read_text(self, pdf_bytes: bytes, max_pages: int | None = None) -> str:
        """Read the embedded text layer of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.
            max_pages: Read at most this many leading pages. ``None`` reads all.

        Returns:
            Page texts joined by newlines, stripped. Empty for scanned PDFs
            without a text layer.

        Raises:
            PdfReadError: if the bytes cannot be parsed as a PDF.
        """
