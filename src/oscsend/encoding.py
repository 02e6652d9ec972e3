import struct
from typing import Optional

from oscsend.data import INT32_MAX, INT32_MIN, Argument, ArgumentType
from oscsend.errors import ArgumentEncodingError
from oscsend.trace import Tracer, emit

# all OSC segments are aligned to this many bytes
ALIGNMENT = 4


def padded_size(length: int) -> int:
    """
    Compute the encoded size of a string of `length` bytes, including the null terminator and the zero padding.

    ### Parameters
    `length` : int
        The number of bytes in the string, excluding the terminator.

    ### Returns
    int
        The smallest multiple of four that is larger than `length`.
    """
    return (length // ALIGNMENT + 1) * ALIGNMENT


def encode_string(value: str, trace: Optional[Tracer] = None) -> bytes:
    """
    Encode a string as an OSC string: the ASCII bytes followed by a null terminator, padded with null bytes to a
    multiple of four. The empty string encodes to four null bytes.

    ### Parameters
    `value` : str
        The string to encode.
    `trace` : Tracer
        Optional callback that receives the encoded bytes.

    ### Returns
    bytes
        The encoded string.
    """
    if not isinstance(value, str):
        raise ArgumentEncodingError(f"Expected str, got {type(value).__name__}.")
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError as e:
        raise ArgumentEncodingError(f"OSC strings must be ASCII, got {value!r}.") from e

    # the remainder of the padded buffer is already zeroed, which includes the terminator
    encoded = raw.ljust(padded_size(len(raw)), b"\x00")
    emit(trace, f"string {value!r}", encoded)
    return encoded


def encode_int32(value: int, trace: Optional[Tracer] = None) -> bytes:
    """Encode an integer as four big-endian bytes (two's complement)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentEncodingError(f"Expected int, got {type(value).__name__}.")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ArgumentEncodingError(f"Integer {value} does not fit into 32 bits.")

    encoded = struct.pack(">i", value)
    emit(trace, f"int32 {value}", encoded)
    return encoded


def encode_float32(value: float, trace: Optional[Tracer] = None) -> bytes:
    """
    Narrow a float to IEEE-754 single precision and encode it as four big-endian bytes. NaN and infinities are
    preserved, finite values outside the single precision range raise an `ArgumentEncodingError`.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentEncodingError(f"Expected float, got {type(value).__name__}.")

    try:
        encoded = struct.pack(">f", value)
    except OverflowError as e:
        raise ArgumentEncodingError(f"Float {value} is out of range for single precision.") from e

    emit(trace, f"float32 {value}", encoded)
    return encoded


def encode_argument(argument: Argument, trace: Optional[Tracer] = None) -> bytes:
    """
    Encode a typed argument.

    ### Parameters
    `argument` : Argument
        The argument to encode. Plain values are converted with `Argument.from_value`.
    `trace` : Tracer
        Optional callback that receives the encoded bytes.

    ### Returns
    bytes
        The encoded argument, its length is a multiple of four.
    """
    argument = Argument.from_value(argument)

    if argument.type == ArgumentType.INT32:
        return encode_int32(argument.value, trace)
    elif argument.type == ArgumentType.FLOAT32:
        return encode_float32(argument.value, trace)
    elif argument.type == ArgumentType.STRING:
        return encode_string(argument.value, trace)
    else:
        raise ArgumentEncodingError(f"Unhandled argument type {argument.type}.")
