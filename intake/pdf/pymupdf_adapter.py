from itertools import islice

import pymupdf

from intake.pdf.base import BasePdfReader
from intake.pdf.exceptions import PdfReadError


class PyMuPdfReader(BasePdfReader):
    """Reads the PDF text layer with PyMuPDF."""

    engine = "pymupdf"

    def read_text(self, pdf_bytes: bytes, max_pages: int | None = None) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                # islice stops pulling pages once the limit is reached.
                texts = [page.get_text() for page in islice(doc, max_pages)]
        except Exception as exc:
            raise PdfReadError(f"{self.engine} could not read document: {exc}") from exc
        return "\n".join(texts).strip()
