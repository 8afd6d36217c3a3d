from intake.config.settings import Settings
from intake.logging.logger import Log
from intake.pdf.base import BasePdfReader
from intake.pdf.pdfplumber_adapter import PdfPlumberReader
from intake.pdf.pymupdf_adapter import PyMuPdfReader

_READERS_BY_ENGINE: dict[str, type[BasePdfReader]] = {
    reader_cls.engine: reader_cls for reader_cls in (PdfPlumberReader, PyMuPdfReader)
}


class PdfReaderFactory:
    """Picks the PDF text-layer reader named by ``Settings.pdf_engine``.

    The classifier and the extractor share the reader returned here.
    """

    @classmethod
    def create(cls, settings: Settings) -> BasePdfReader:
        return cls.for_engine(settings.pdf_engine)

    @staticmethod
    def for_engine(engine: str) -> BasePdfReader:
        name = engine.strip().lower()
        try:
            reader_cls = _READERS_BY_ENGINE[name]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{name}'. Choose from: {sorted(_READERS_BY_ENGINE)}"
            ) from None
        Log.debug(f"Reading PDF text layers with {reader_cls.__name__}")
        return reader_cls()
