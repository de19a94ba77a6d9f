"""
Module này chứa các hàm tiện ích về socket được dùng bởi resolver.
Các chức năng bao gồm:
- Mở một socket UDP trong phạm vi `with` và luôn đóng nó khi ra khỏi.
- Đóng socket một cách an toàn.
"""

import errno
import socket
from contextlib import contextmanager
from typing import Iterator

from exceptions import SocketCreateFailed, UnavailableFamily
from schemas import AddressFamily

# Các mã lỗi cho biết họ địa chỉ không được hỗ trợ trên máy này
UNAVAILABLE_FAMILY_ERRNOS = {
    errno.EAFNOSUPPORT,
    errno.EPFNOSUPPORT,
    errno.EPROTONOSUPPORT,
}


def close_socket(sock: socket.socket):
    """
    Đóng một đối tượng socket một cách an toàn.
    Gọi nhiều lần cũng không sao: socket đã đóng sẽ được bỏ qua.

    Args:
        sock (socket.socket): Đối tượng socket cần đóng.
    """
    # fileno() == -1 có nghĩa là socket đã bị đóng
    if sock.fileno() == -1:
        return
    sock.close()


@contextmanager
def open_datagram_socket(family: AddressFamily) -> Iterator[socket.socket]:
    """
    Tạo một socket UDP (SOCK_DGRAM) cho họ địa chỉ đã cho.
    Socket luôn được đóng khi khối `with` kết thúc, kể cả khi có lỗi.

    Args:
        family (AddressFamily): Họ địa chỉ (IPv4 hoặc IPv6).

    Raises:
        UnavailableFamily: Máy không hỗ trợ họ địa chỉ này.
        SocketCreateFailed: Không tạo được socket vì lý do khác.
    """
    try:
        sock = socket.socket(family.socket_family, socket.SOCK_DGRAM)
    except OSError as e:
        if e.errno in UNAVAILABLE_FAMILY_ERRNOS:
            raise UnavailableFamily.from_error(family.label, e) from e
        raise SocketCreateFailed.from_error(family.label, e) from e

    try:
        yield sock
    finally:
        # Luôn đóng socket sau khi hoàn tất
        close_socket(sock)
