from typing import Any, Dict, Iterable, Optional

from oscsend.message import OSCMessage
from oscsend.params import SenderParams
from oscsend.trace import StreamTracer, Tracer
from oscsend.transmit import transmit


def send(
    address: str,
    arguments: Iterable[Any] = (),
    host: str = "127.0.0.1",
    port: int = 8000,
    debug: bool = False,
    *,
    timeout: Optional[float] = None,
    broadcast: bool = False,
    tracer: Optional[Tracer] = None,
) -> int:
    """
    Encode an OSC message and send it as a single UDP datagram. The message is fully encoded before a socket is
    opened, so invalid arguments never result in a partially sent message.

    ### Parameters
    `address` : str
        The OSC address pattern, e.g. `/volume`.
    `arguments` : Iterable[Any]
        The message arguments. Supported are int (32 bit), float (sent as 32 bit) and ASCII str.
    `host` : str
        The destination host.
    `port` : int
        The destination port.
    `debug` : bool
        Write a trace of every encoding stage to stderr.
    `timeout` : float
        Optional send timeout in seconds.
    `broadcast` : bool
        Allow sending to a broadcast address.
    `tracer` : Tracer
        Custom trace callback, takes precedence over `debug`.

    ### Returns
    int
        The number of bytes sent.

    ### Raises
    ArgumentEncodingError
        If an argument can not be encoded.
    TransmissionError
        If the datagram could not be sent.
    """
    if tracer is None and debug:
        tracer = StreamTracer()

    buffer = OSCMessage(address, arguments).encode(trace=tracer)
    return transmit(buffer, host, port, timeout=timeout, broadcast=broadcast)


class OSCSender:
    """
    Sends OSC messages to a fixed destination. The sender only stores its configuration, every message is sent
    through a new socket.

    ### Parameters
    `params` : SenderParams
        The sender configuration. A dict is converted to `SenderParams`, None uses the defaults.
    `tracer` : Tracer
        Custom trace callback used instead of the stderr tracer when `common.debug` is set.
    """

    def __init__(self, params: SenderParams = None, tracer: Optional[Tracer] = None) -> None:
        if params is None:
            params = SenderParams()
        elif isinstance(params, dict):
            params = SenderParams(params)
        self.params = params
        self.tracer = tracer

    @classmethod
    def from_config(cls, path: str, overrides: Dict[str, Dict[str, Any]] = None) -> "OSCSender":
        """Create a sender from a YAML config file, optionally overriding some of its values."""
        params = SenderParams.load(path)
        if overrides:
            params.update(overrides)
        return cls(params)

    def _tracer(self) -> Optional[Tracer]:
        if not self.params.common.debug.value:
            return None
        return self.tracer if self.tracer is not None else StreamTracer()

    def encode(self, address: str, arguments: Iterable[Any] = ()) -> bytes:
        """Encode a message without sending it."""
        return OSCMessage(address, arguments).encode(trace=self._tracer())

    def send(self, address: str, arguments: Iterable[Any] = ()) -> int:
        """Encode and send a message, returns the number of bytes sent."""
        osc = self.params.osc
        return send(
            address,
            arguments,
            host=osc.host.value,
            port=osc.port.value,
            timeout=osc.timeout.value or None,
            broadcast=osc.broadcast.value,
            tracer=self._tracer(),
        )

    def __repr__(self) -> str:
        osc = self.params.osc
        return f"{type(self).__name__}({osc.host.value}:{osc.port.value})"
