import socket

import pytest

from oscsend import transmit

# keep a reference to the real socket class, the recorder below replaces socket.socket during tests
SOCKET_CLASS = socket.socket


class SocketRecorder:
    """
    Records all sockets created by oscsend during a test. If `error` is set, `sendto` raises it instead of sending.
    """

    def __init__(self):
        self.created = []
        self.error = None

    def make_class(self):
        recorder = self

        class RecordingSocket(SOCKET_CLASS):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                recorder.created.append(self)

            def sendto(self, *args, **kwargs):
                if recorder.error is not None:
                    raise recorder.error
                return super().sendto(*args, **kwargs)

        return RecordingSocket

    @property
    def open(self):
        return [sock for sock in self.created if sock.fileno() != -1]


@pytest.fixture(autouse=True)
def sockets(monkeypatch):
    """Record sockets opened by oscsend and make sure none of them is left open after the test."""
    recorder = SocketRecorder()
    monkeypatch.setattr(transmit.socket, "socket", recorder.make_class())

    yield recorder

    leaked = recorder.open
    if len(leaked) > 0:
        for sock in leaked:
            sock.close()
        raise RuntimeError(f"Sockets are still open after the test passed: {leaked}")


@pytest.fixture
def udp_receiver():
    """A UDP socket bound to a free port on the loopback interface."""
    sock = SOCKET_CLASS(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()
