import socket

import pytest


class FakeSocket:
    """Socket giả: không chạm vào mạng, ghi lại mọi lần gọi close()."""

    sockname_by_family = {
        socket.AF_INET: ("192.0.2.10", 40000),
        socket.AF_INET6: ("2001:db8:1::10", 40000, 0, 0),
    }
    create_errors = {}
    connect_errors = {}
    getsockname_errors = {}
    created = []

    def __init__(self, family, type):
        error = self.create_errors.get(family)
        if error is not None:
            raise error
        self.family = family
        self.type = type
        self.peer = None
        self.close_calls = 0
        self.created.append(self)

    def connect(self, address):
        error = self.connect_errors.get(self.family)
        if error is not None:
            raise error
        self.peer = address

    def getsockname(self):
        error = self.getsockname_errors.get(self.family)
        if error is not None:
            raise error
        return self.sockname_by_family[self.family]

    def fileno(self):
        return -1 if self.close_calls else 3

    def close(self):
        self.close_calls += 1


@pytest.fixture
def fake_socket(monkeypatch):
    class Fake(FakeSocket):
        sockname_by_family = dict(FakeSocket.sockname_by_family)
        create_errors = {}
        connect_errors = {}
        getsockname_errors = {}
        created = []

    monkeypatch.setattr(socket, "socket", Fake)
    return Fake
