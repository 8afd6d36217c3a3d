import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    """Document content sent alongside a prompt.

    Images travel as a base64 data URL; PDFs travel as their text layer.
    Exactly one of ``image_data_url`` and ``text`` is set.
    """

    media_type: str
    image_data_url: str | None = None
    text: str | None = None

    @classmethod
    def from_image(cls, payload: bytes, media_type: str) -> "Attachment":
        encoded = base64.b64encode(payload).decode("ascii")
        return cls(media_type=media_type, image_data_url=f"data:{media_type};base64,{encoded}")

    @classmethod
    def from_text(cls, text: str, media_type: str) -> "Attachment":
        return cls(media_type=media_type, text=text)
