"""Writing encoded fields to a caller-supplied binary sink."""

import logging
from typing import IO

from aprs_coords.errors import EncodeError

__all__ = ["write_field"]

logger = logging.getLogger(__name__)


def write_field(buf: IO[bytes], data: bytes) -> None:
    """Write ``data`` to ``buf`` in full, converting sink failures to ``EncodeError``.

    A sink that raises part way through keeps whatever it already accepted;
    nothing further is written.
    """
    try:
        written = buf.write(data)
    except OSError as e:
        logger.warning("Sink rejected %d byte field %r: %s", len(data), data, e)
        raise EncodeError(f"Failed to write {data!r}") from e

    # Raw (unbuffered) streams may accept fewer bytes than offered
    if written is not None and written != len(data):
        logger.warning("Sink accepted %d of %d bytes of %r", written, len(data), data)
        raise EncodeError(f"Short write: {written} of {len(data)} bytes of {data!r}")
