"""Writing greyscale sample data as PNG images."""

import struct
import zlib

from .errors import BadBitDepthError, SavePngError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_COLOR_GREYSCALE = 0
_BIT_DEPTHS = frozenset({1, 2, 4, 8, 16})


def _chunk(kind, payload):
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


def encode_greyscale(data, width, height, depth):
    """Encode packed, row-major greyscale samples as PNG bytes.

    Raises ``BadBitDepthError`` for a depth PNG does not allow for greyscale
    and ``SavePngError`` if ``data`` does not hold exactly one image.
    """
    if depth not in _BIT_DEPTHS:
        raise BadBitDepthError(depth)
    samples = memoryview(bytes(data))
    stride = (width * depth + 7) // 8
    expected = stride * height
    if len(samples) != expected:
        raise SavePngError(
            f"couldn't encode PNG: wrong data size, expected {expected} "
            f"got {len(samples)}"
        )

    # Every scanline is preceded by filter type 0 (none).
    raw = b"".join(
        b"\x00" + samples[row * stride:(row + 1) * stride] for row in range(height)
    )
    header = struct.pack(
        ">IIBBBBB", width, height, depth, _COLOR_GREYSCALE, 0, 0, 0
    )
    return b"".join(
        (
            PNG_SIGNATURE,
            _chunk(b"IHDR", header),
            _chunk(b"IDAT", zlib.compress(raw)),
            _chunk(b"IEND", b""),
        )
    )


def save_greyscale(path, data, width, height, depth):
    """Write greyscale samples to ``path`` as a PNG file.

    The file is created before the image is encoded. I/O failures are
    raised as ``SavePngError``.
    """
    try:
        with open(path, "wb") as fout:
            fout.write(encode_greyscale(data, width, height, depth))
    except OSError as exc:
        raise SavePngError(f"couldn't save PNG: {exc}") from exc