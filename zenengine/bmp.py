"""Reading uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

HEADER_SIZE = 54
_MAGIC = b"BM"
_DATA_OFFSET_AT = 0x0A
_WIDTH_AT = 0x12
_HEIGHT_AT = 0x16
_IMAGE_SIZE_AT = 0x22


class BmpError(ValueError):
    """Raised when data is not a usable BMP file."""


@dataclass(frozen=True)
class BmpImage:
    """A BMP image with its raw BGR pixel bytes."""

    width: int
    height: int
    data_offset: int
    image_size: int
    pixels: bytes


def _read_u32(data: bytes, offset: int) -> int:
    (value,) = struct.unpack_from("<I", data, offset)
    return value


def parse_bmp(data: bytes) -> BmpImage:
    """Parse the 54-byte header and the pixel bytes that follow it.

    A zero image size is taken as width * height * 3 and a zero data offset
    as 54. Pixels are read straight after the header, up to the image size.
    """
    if len(data) < HEADER_SIZE:
        raise BmpError("not a correct BMP file: header is truncated")
    if bytes(data[:2]) != _MAGIC:
        raise BmpError("not a correct BMP file: missing BM signature")

    data_offset = _read_u32(data, _DATA_OFFSET_AT)
    image_size = _read_u32(data, _IMAGE_SIZE_AT)
    width = _read_u32(data, _WIDTH_AT)
    height = _read_u32(data, _HEIGHT_AT)

    if image_size == 0:
        image_size = width * height * 3
    if data_offset == 0:
        data_offset = HEADER_SIZE

    pixels = bytes(data[HEADER_SIZE:HEADER_SIZE + image_size])
    return BmpImage(width, height, data_offset, image_size, pixels)


def load_bmp(path: Union[str, os.PathLike]) -> BmpImage:
    """Read and parse a BMP file; OSError propagates if it cannot be read."""
    return parse_bmp(Path(path).read_bytes())