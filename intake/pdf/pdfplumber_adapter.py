import io

import pdfplumber

from intake.pdf.base import BasePdfReader
from intake.pdf.exceptions import PdfReadError


class PdfPlumberReader(BasePdfReader):
    """Reads the PDF text layer with pdfplumber."""

    engine = "pdfplumber"

    def read_text(self, pdf_bytes: bytes, max_pages: int | None = None) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = pdf.pages if max_pages is None else pdf.pages[:max_pages]
                texts = [page.extract_text() or "" for page in pages]
        except Exception as exc:
            raise PdfReadError(f"{self.engine} could not read document: {exc}") from exc
        return "\n".join(texts).strip()
