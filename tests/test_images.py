from __future__ import annotations

import base64

import pytest
from google.genai import types

from core.exceptions import EncodingError
from services.images import EncodedImage, encode_image

RAW = b"\xff\xd8\xff\xe0fake-jpeg"
B64 = base64.b64encode(RAW).decode()


def test_bytes_are_base64_encoded():
    img = encode_image(RAW, "image/jpeg")
    assert img == EncodedImage(data=B64, mime_type="image/jpeg")
    assert img.data_url == f"data:image/jpeg;base64,{B64}"


def test_bytes_without_mime_fall_back():
    assert encode_image(RAW).mime_type == "application/octet-stream"


def test_data_url_is_split_at_comma():
    img = encode_image(f"data:image/webp;base64,{B64}")
    assert img.mime_type == "image/webp"
    assert img.data == B64


@pytest.mark.parametrize(
    "url",
    ["data:image/png,plain", "data:image/png;base64,@@@notbase64", "data:image/png;base64"],
)
def test_bad_data_url(url):
    with pytest.raises(EncodingError):
        encode_image(url)


def test_file_path(tmp_path):
    photo = tmp_path / "lunch.png"
    photo.write_bytes(RAW)
    img = encode_image(str(photo))
    assert img.mime_type == "image/png"
    assert base64.b64decode(img.data) == RAW


def test_explicit_mime_wins_over_extension(tmp_path):
    photo = tmp_path / "lunch.png"
    photo.write_bytes(RAW)
    assert encode_image(photo, "image/heic").mime_type == "image/heic"


def test_missing_file(tmp_path):
    with pytest.raises(EncodingError) as exc_info:
        encode_image(tmp_path / "nope.jpg")
    assert exc_info.value.status_code == 400


def test_unsupported_source():
    with pytest.raises(EncodingError):
        encode_image(12345)  # type: ignore[arg-type]


def test_encoded_image_passes_through():
    img = EncodedImage(data=B64, mime_type="image/jpeg")
    assert encode_image(img) is img


def test_to_part():
    part = EncodedImage(data=B64, mime_type="image/jpeg").to_part()
    assert isinstance(part, types.Part)
    assert part.inline_data.data == RAW
    assert part.inline_data.mime_type == "image/jpeg"


def test_data_url_parameters_are_not_part_of_mime():
    img = encode_image(f"data:image/png;name=lunch.png;base64,{B64}")
    assert img.mime_type == "image/png"
    assert img.data == B64
