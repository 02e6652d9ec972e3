import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from oscsend.data import Argument
from oscsend.encoding import ALIGNMENT, encode_argument, encode_string
from oscsend.errors import ArgumentEncodingError, ConstructionError
from oscsend.trace import Tracer, emit
from oscsend.typetags import build_type_tags

logger = logging.getLogger(__name__)

# largest UDP payload over IPv4, larger datagrams will most likely be dropped
MAX_UDP_PAYLOAD = 65507


@dataclass(frozen=True)
class OSCMessage:
    """
    An OSC message consisting of an address pattern and an ordered list of arguments. The arguments are converted
    to `Argument` objects on construction, so an unsupported argument fails here, before anything is encoded.

    ### Parameters
    `address` : str
        The OSC address pattern, conventionally starting with `/`.
    `arguments` : Iterable[Any]
        Plain values (int, float, str) or `Argument` objects.
    """

    address: str
    arguments: Tuple[Argument, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.address, str):
            raise ArgumentEncodingError(f"Expected address of type str, got {type(self.address).__name__}.")
        if not self.address.isascii():
            raise ArgumentEncodingError(f"OSC addresses must be ASCII, got {self.address!r}.")
        if not self.address.startswith("/"):
            logger.warning(f"OSC address '{self.address}' does not start with '/'.")

        if isinstance(self.arguments, (str, bytes)) or not isinstance(self.arguments, Iterable):
            raise ArgumentEncodingError(f"Expected an iterable of arguments, got {type(self.arguments).__name__}.")
        # frozen dataclass, so we need to bypass __setattr__
        object.__setattr__(self, "arguments", tuple(Argument.from_value(arg) for arg in self.arguments))

    @property
    def type_tags(self) -> str:
        return build_type_tags(self.arguments)

    def encode(self, trace: Optional[Tracer] = None) -> bytes:
        """Encode the message into an OSC datagram. See `assemble`."""
        return assemble(self.address, self.arguments, trace=trace)


def _check_aligned(name: str, segment: bytes) -> None:
    if len(segment) % ALIGNMENT != 0:
        raise ConstructionError(
            f"Encoded {name} has length {len(segment)}, which is not a multiple of {ALIGNMENT}. "
            "This is a bug in oscsend."
        )


def assemble(address: str, arguments: Iterable[Any], trace: Optional[Tracer] = None) -> bytes:
    """
    Assemble an OSC message from an address and a list of arguments. The address, the type tag string and all
    arguments are encoded first, then copied into a single buffer that is allocated with the final size.

    ### Parameters
    `address` : str
        The OSC address pattern.
    `arguments` : Iterable[Any]
        Plain values or `Argument` objects, in message order.
    `trace` : Tracer
        Optional callback that is called for every encoding stage with the stage name and its bytes.

    ### Returns
    bytes
        The encoded message, ready to be sent as a single datagram.
    """
    arguments = [Argument.from_value(arg) for arg in arguments]

    # encode all segments
    segments: List[Tuple[str, bytes]] = []

    addr = encode_string(address)
    emit(trace, "address", addr)
    segments.append(("address", addr))

    tags = build_type_tags(arguments)
    emit(trace, "type tag (raw)", tags.encode("ascii"))
    tags = encode_string(tags)
    emit(trace, "type tag", tags)
    segments.append(("type tag", tags))

    for i, arg in enumerate(arguments):
        name = f"argument {i} ({arg.tag})"
        encoded = encode_argument(arg)
        emit(trace, name, encoded)
        segments.append((name, encoded))

    for name, segment in segments:
        _check_aligned(name, segment)

    # copy the segments into a pre-sized buffer
    total = sum(len(segment) for _, segment in segments)
    buffer = bytearray(total)
    offset = 0
    for _, segment in segments:
        buffer[offset : offset + len(segment)] = segment
        offset += len(segment)

    if offset != total:
        raise ConstructionError(f"Wrote {offset} bytes into a buffer of {total} bytes. This is a bug in oscsend.")
    _check_aligned("message", buffer)

    if total > MAX_UDP_PAYLOAD:
        logger.warning(f"OSC message for '{address}' is {total} bytes, which exceeds the UDP payload limit.")

    emit(trace, "message", buffer)
    return bytes(buffer)
