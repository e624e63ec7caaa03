"""
services/images.py
────────────────────────────────────────────────────────────────────────
Turn a submitted photo into the base64 + media-type pair Gemini expects.
"""
from __future__ import annotations

import base64
import binascii
import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path

from google.genai import types

from core.exceptions import EncodingError

DEFAULT_MIME = "application/octet-stream"


@dataclass(frozen=True)
class EncodedImage:
    data: str          # raw base64, no data-url prefix
    mime_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    def to_part(self) -> types.Part:
        return types.Part.from_bytes(
            data=base64.b64decode(self.data), mime_type=self.mime_type
        )

    @classmethod
    def from_data_url(cls, url: str) -> "EncodedImage":
        """Split a ``data:<mime>;base64,<payload>`` URL at its first comma."""
        header, sep, payload = url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise EncodingError(details={"reason": "not a base64 data URL"})
        try:
            base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise EncodingError(details={"reason": str(exc)}) from exc
        mime = header[len("data:"):].split(";")[0] or DEFAULT_MIME
        return cls(data=payload, mime_type=mime)


ImageSource = bytes | str | os.PathLike | EncodedImage


def encode_bytes(data: bytes, mime_type: str | None) -> EncodedImage:
    return EncodedImage(
        data=base64.b64encode(data).decode("ascii"),
        mime_type=mime_type or DEFAULT_MIME,
    )


def encode_file(path: str | os.PathLike, mime_type: str | None = None) -> EncodedImage:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise EncodingError(details={"path": str(p), "reason": str(exc)}) from exc
    return encode_bytes(data, mime_type or mimetypes.guess_type(p.name)[0])


def encode_image(image: ImageSource, mime_type: str | None = None) -> EncodedImage:
    """Accept bytes, a file path, a data URL or an already encoded image."""
    if isinstance(image, EncodedImage):
        return image
    if isinstance(image, (bytes, bytearray)):
        return encode_bytes(bytes(image), mime_type)
    if isinstance(image, str) and image.startswith("data:"):
        return EncodedImage.from_data_url(image)
    if isinstance(image, (str, os.PathLike)):
        return encode_file(image, mime_type)
    raise EncodingError(details={"reason": f"unsupported image source {type(image).__name__}"})
