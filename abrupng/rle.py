"""Decoding of the run-length compressed image data stored in ABR files."""

import struct


def _read_exact(stream, count):
    buf = bytearray()
    while len(buf) < count:
        chunk = stream.read(count - len(buf))
        if not chunk:
            raise EOFError("failed to fill whole buffer")
        buf += chunk
    return bytes(buf)


def read_rle_data(stream, height, size_hint):
    """Read ``height`` rows of run-length compressed samples from ``stream``.

    The data starts with one big-endian u16 per row giving that row's
    compressed length, followed by the packed rows. ``size_hint`` is the
    expected decoded size; it is advisory and not enforced. Raises
    ``EOFError`` if the stream ends early.
    """
    del size_hint
    table = _read_exact(stream, 2 * height)
    total = sum(length for (length,) in struct.iter_unpack(">H", table))

    data = bytearray()
    consumed = 0
    while consumed < total:
        (n,) = struct.unpack(">b", _read_exact(stream, 1))
        consumed += 1
        if n == -128:
            continue
        if n < 0:
            data += _read_exact(stream, 1) * (1 - n)
            consumed += 1
        else:
            count = n + 1
            data += _read_exact(stream, count)
            consumed += count
    return bytes(data)