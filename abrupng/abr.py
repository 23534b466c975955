"""Reading image brushes out of Adobe ABR files."""

import io
import struct
from dataclasses import dataclass

from .errors import (
    BrushError,
    Found8bimError,
    OpenError,
    UnsupportedBitDepthError,
    UnsupportedBrushTypeError,
    UnsupportedVersionError,
)
from .rle import read_rle_data

_READ_ERRORS = (OSError, EOFError)


@dataclass(frozen=True)
class ImageBrush:
    """An image brush: row-major ``width`` x ``height`` samples."""

    width: int
    height: int
    depth: int
    data: bytes


def _read_exact(stream, count):
    buf = bytearray()
    while len(buf) < count:
        chunk = stream.read(count - len(buf))
        if not chunk:
            raise EOFError("failed to fill whole buffer")
        buf += chunk
    return bytes(buf)


def _read_u8(stream):
    return _read_exact(stream, 1)[0]


def _read_u16(stream):
    return struct.unpack(">H", _read_exact(stream, 2))[0]


def _read_u32(stream):
    return struct.unpack(">I", _read_exact(stream, 4))[0]


def _read_body_guarded(read_body):
    try:
        return read_body()
    except _READ_ERRORS as exc:
        raise BrushError(f"read error: {exc}") from exc


def _read_image(stream, width, height, depth, compressed):
    size = width * height * (depth >> 3)
    if compressed:
        data = read_rle_data(stream, height, size)
    else:
        data = _read_exact(stream, size)
    return ImageBrush(width, height, depth, bytes(data))


class _Abr1Decoder:
    """Versions 1 and 2: a counted list of length-prefixed brushes."""

    def __init__(self, stream, version, count):
        self._stream = stream
        self._version = version
        self._count = count
        self._next_pos = stream.tell()

    def next_brush(self):
        if self._count == 0:
            return None
        self._count -= 1
        pos = self._next_pos
        try:
            self._stream.seek(pos)
            length = _read_u16(self._stream)
        except _READ_ERRORS as exc:
            # Without the length the next brush cannot be found.
            self._count = 0
            raise BrushError(f"read error: {exc}") from exc
        self._next_pos = pos + 2 + length
        return _read_body_guarded(self._read_body)

    def _read_body(self):
        stream = self._stream
        brush_type = _read_u16(stream)
        if brush_type != 2:
            raise UnsupportedBrushTypeError(brush_type)
        _read_exact(stream, 4 + 2)  # misc, spacing
        if self._version == 2:
            name_len = _read_u32(stream)
            stream.seek(2 * name_len, io.SEEK_CUR)
        _read_exact(stream, 1)  # antialiasing
        top, left, bottom, right = struct.unpack(">4H", _read_exact(stream, 8))
        _read_exact(stream, 16)  # long bounds
        depth = _read_u16(stream)
        if depth != 8:
            raise UnsupportedBitDepthError(depth)
        compressed = _read_u8(stream) != 0
        width = (right - left) & 0xFFFF
        height = (bottom - top) & 0xFFFF
        return _read_image(stream, width, height, depth, compressed)


class _Abr6Decoder:
    """Versions 6 and 10: brushes stored in a 'samp' section."""

    def __init__(self, stream, version, subversion):
        while True:
            if _read_exact(stream, 4) == b"8bim":
                raise Found8bimError()
            if _read_exact(stream, 4) == b"samp":
                break
            length = _read_u32(stream)
            stream.seek(length, io.SEEK_CUR)
        length = _read_u32(stream)
        start = stream.tell()
        self._stream = stream
        self._version = version
        self._subversion = subversion
        self._section_end = start + length
        self._next_pos = start

    def next_brush(self):
        if self._next_pos >= self._section_end:
            return None
        pos = self._next_pos
        try:
            self._stream.seek(pos)
            length = _read_u32(self._stream)
        except _READ_ERRORS as exc:
            self._next_pos = self._section_end
            raise BrushError(f"read error: {exc}") from exc
        # Brushes are aligned to 4-byte boundaries.
        self._next_pos = (pos + 4 + length + 3) & ~3
        return _read_body_guarded(self._read_body)

    def _read_body(self):
        stream = self._stream
        stream.seek(47 if self._subversion == 1 else 301, io.SEEK_CUR)
        top, left, bottom, right = struct.unpack(">4I", _read_exact(stream, 16))
        depth = _read_u16(stream)
        if depth != 8:
            raise UnsupportedBitDepthError(depth)
        compressed = _read_u8(stream) != 0
        width = (right - left) & 0xFFFFFFFF
        height = (bottom - top) & 0xFFFFFFFF
        return _read_image(stream, width, height, depth, compressed)


class Brushes:
    """Iterator over the image brushes of an ABR file.

    A brush that cannot be read raises ``BrushError`` from ``__next__``;
    iteration may be resumed afterwards with the following brush.
    """

    def __init__(self, decoder):
        self._decoder = decoder

    def __iter__(self):
        return self

    def __next__(self):
        brush = self._decoder.next_brush()
        if brush is None:
            raise StopIteration
        return brush


def open_abr(stream):
    """Open a seekable binary stream as an ABR file and iterate its brushes."""
    try:
        version = _read_u16(stream)
        subversion = _read_u16(stream)
        if version in (1, 2):
            decoder = _Abr1Decoder(stream, version, subversion)
        elif version in (6, 10) and subversion in (1, 2):
            decoder = _Abr6Decoder(stream, version, subversion)
        else:
            raise UnsupportedVersionError(version, subversion)
    except _READ_ERRORS as exc:
        raise OpenError(f"read error: {exc}") from exc
    return Brushes(decoder)