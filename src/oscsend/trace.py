import sys
from typing import Callable, Optional, TextIO

# a tracer receives the name of an encoding stage and the bytes produced by that stage
Tracer = Callable[[str, bytes], None]


def format_bytes(data: bytes) -> str:
    """Format bytes as space-separated upper-case hex, e.g. `2F 76 00 00`."""
    return bytes(data).hex(" ").upper()


class StreamTracer:
    """
    A tracer that writes one human-readable line per encoding stage to a text stream. This is the tracer used
    when sending with `debug=True`.

    ### Parameters
    `stream` : TextIO
        The stream to write to. If None, writes to `sys.stderr` (looked up on every call so that redirection works).
    `prefix` : str
        A prefix for every line.
    """

    def __init__(self, stream: Optional[TextIO] = None, prefix: str = "[oscsend]") -> None:
        self.stream = stream
        self.prefix = prefix

    def __call__(self, stage: str, data: bytes) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        print(f"{self.prefix} {stage}: {format_bytes(data)} ({len(data)} bytes)", file=stream)


def emit(trace: Optional[Tracer], stage: str, data: bytes) -> None:
    if trace is not None:
        trace(stage, bytes(data))
