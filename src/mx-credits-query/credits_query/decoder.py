from typing import Sequence

from .errors import ValueOutOfRangeError

MAX_UINT64 = 2**64 - 1


def decode_uint64(buff: Sequence[bytes]) -> int:
    """Decode the first return-data item as a big-endian unsigned 64-bit integer.

    An empty sequence means no value and decodes to 0.
    """
    if not buff:
        return 0

    value = int.from_bytes(bytes(buff[0]), "big", signed=False)
    if value > MAX_UINT64:
        raise ValueOutOfRangeError(f"value {value} is not a uint64")
    return value


def encode_uint64_arg(value: int) -> str:
    """Hex-encode a uint64 query argument, padded to whole bytes."""
    if value < 0 or value > MAX_UINT64:
        raise ValueOutOfRangeError(f"value {value} is not a uint64")

    text = format(value, "x")
    if len(text) % 2 != 0:
        return "0" + text
    return text
