from pathlib import Path

from intake.documents.models import MediaType
from intake.pipeline.exceptions import FileReadError
from intake.pipeline.models import SubmittedFile

MEDIA_TYPES_BY_SUFFIX: dict[str, str] = {
    ".pdf": MediaType.PDF,
    ".png": MediaType.PNG,
    ".jpg": MediaType.JPEG,
    ".jpeg": MediaType.JPEG,
}

UNKNOWN_MEDIA_TYPE = "application/octet-stream"


class FileLoader:
    """Reads local files into SubmittedFile records."""

    def load(self, path: Path) -> SubmittedFile:
        """Read a file's bytes and metadata.

        The media type comes from the suffix. Unknown suffixes are passed on as
        ``application/octet-stream`` and left for the classifier to reject.

        Raises:
            FileReadError: if the path is missing or unreadable.
        """
        try:
            stat = path.stat()
            payload = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return SubmittedFile(
            name=path.name,
            last_modified=int(stat.st_mtime * 1000),
            media_type=MEDIA_TYPES_BY_SUFFIX.get(path.suffix.lower(), UNKNOWN_MEDIA_TYPE),
            payload=payload,
        )

    def load_all(self, paths: list[Path]) -> list[SubmittedFile]:
        return [self.load(path) for path in paths]
