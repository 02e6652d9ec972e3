class OSCError(Exception):
    """Base class for all errors raised while encoding or sending an OSC message."""


class ArgumentEncodingError(OSCError, ValueError):
    """
    Raised when an argument (or the address) cannot be represented in an OSC message, e.g. because its type is
    not one of int32, float32 or string, or because its value is out of range.
    """


class TransmissionError(OSCError):
    """
    Raised when the datagram could not be handed to the network.

    ### Parameters
    `message` : str
        The error message.
    `host` : str
        The destination host.
    `port` : int
        The destination port.
    """

    def __init__(self, message: str, host: str = None, port: int = None) -> None:
        super().__init__(message)
        self.host = host
        self.port = port


class ConstructionError(OSCError, RuntimeError):
    """Raised when an encoded segment violates the OSC alignment rules. This indicates a bug in oscsend."""
