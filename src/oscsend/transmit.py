import logging
import socket
from typing import Optional

from oscsend.errors import TransmissionError

logger = logging.getLogger(__name__)


def transmit(
    buffer: bytes, host: str, port: int, timeout: Optional[float] = None, broadcast: bool = False
) -> int:
    """
    Send a buffer as a single UDP datagram. A new socket is opened for every call and closed before returning,
    also if sending fails. No response is awaited.

    ### Parameters
    `buffer` : bytes
        The datagram to send.
    `host` : str
        The destination host name or IP address.
    `port` : int
        The destination port.
    `timeout` : float
        Optional timeout for the send call in seconds. None or 0 blocks until the datagram was handed to the network.
    `broadcast` : bool
        Allow sending to a broadcast address.

    ### Returns
    int
        The number of bytes sent.

    ### Raises
    TransmissionError
        If the destination is invalid or the socket reports an error.
    """
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port <= 65535:
        raise TransmissionError(f"Invalid destination port {port!r}, expected 1-65535.", host, port)
    if not isinstance(host, str) or len(host) == 0 or "\x00" in host:
        raise TransmissionError(f"Invalid destination host {host!r}.", host, port)
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not timeout >= 0
    ):
        raise TransmissionError(f"Invalid timeout {timeout!r}, expected None or a non-negative number.", host, port)

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            if broadcast:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            if timeout:
                sock.settimeout(timeout)

            sent = sock.sendto(buffer, (host, port))
    except (OSError, OverflowError, UnicodeError) as e:
        raise TransmissionError(f"Failed to send OSC message to {host}:{port}: {e}", host, port) from e

    if sent != len(buffer):
        raise TransmissionError(f"Sent only {sent} of {len(buffer)} bytes to {host}:{port}.", host, port)

    logger.debug(f"Sent {sent} bytes to {host}:{port}")
    return sent
