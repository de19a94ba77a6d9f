"""\
Đây là phần chính của công cụ: xác định địa chỉ IP đi ra (outgoing) mặc định
của máy cho IPv4 và IPv6.

Cách làm: tạo một socket UDP, gọi connect() đến một địa chỉ công cộng
"giả" (dành riêng cho tài liệu), rồi đọc lại địa chỉ cục bộ mà kernel đã chọn
dựa trên bảng định tuyến. Với UDP, connect() không gửi gói tin nào ra mạng,
nên địa chỉ đích không cần phải tồn tại.
"""

import logging
import socket
from typing import Iterable, List, Union

from configs import REMOTE_PORT
from exceptions import (
    AddressParseFailed,
    AssociationFailed,
    LocalAddressQueryFailed,
    ResolveError,
)
from schemas import AddressFamily, RemoteEndpoint, ResolutionOutcome, ResolvedAddress
from utils import open_datagram_socket

logger = logging.getLogger(__name__)

DEFAULT_FAMILIES = (AddressFamily.IPV4, AddressFamily.IPV6)


def get_remote_endpoint(family: AddressFamily) -> RemoteEndpoint:
    """
    Tạo địa chỉ đích cố định cho một họ địa chỉ.

    Raises:
        AddressParseFailed: Nếu địa chỉ cấu hình không đúng cú pháp.
    """
    host = family.remote_host
    try:
        socket.inet_pton(family.socket_family, host)
    except (OSError, ValueError) as e:
        raise AddressParseFailed.from_error(family.label, e) from e
    return RemoteEndpoint(host=host, port=REMOTE_PORT)


def resolve(family: Union[AddressFamily, str]) -> ResolvedAddress:
    """
    Xác định địa chỉ IP đi ra mặc định cho một họ địa chỉ.
    Chỉ thử một lần, không thử lại. Hàm không bao giờ bị chặn (block)
    vì connect() của UDP chỉ tra bảng định tuyến trong kernel.

    Args:
        family (AddressFamily | str): AddressFamily.IPV4 hoặc AddressFamily.IPV6
            (hoặc chuỗi "ipv4" / "ipv6").

    Returns:
        ResolvedAddress: Địa chỉ cục bộ mà kernel chọn để đi ra ngoài.

    Raises:
        ResolveError: Một trong các lớp con, tùy theo bước bị lỗi.
    """
    family = AddressFamily(family)

    with open_datagram_socket(family) as sock:
        remote = get_remote_endpoint(family)

        # Không có kết nối thật nào xảy ra: kernel chỉ ghi nhận địa chỉ đích
        # và chọn địa chỉ nguồn cho socket.
        try:
            sock.connect(remote.sockaddr)
        except OSError as e:
            logger.debug("%s connect to %s failed: %s", family.label, remote.host, e)
            raise AssociationFailed.from_error(family.label, e) from e

        try:
            sockname = sock.getsockname()
        except OSError as e:
            raise LocalAddressQueryFailed.from_error(family.label, e) from e

    # sockname là (host, port) với IPv4, (host, port, flowinfo, scope_id) với IPv6.
    # Bỏ cổng tạm thời và phần zone "%eth0" nếu có.
    host = sockname[0].split("%", 1)[0]
    logger.debug("%s outgoing address: %s", family.label, host)
    return ResolvedAddress(family=family, address=host)


def resolve_all(
    families: Iterable[Union[AddressFamily, str]] = DEFAULT_FAMILIES,
) -> List[ResolutionOutcome]:
    """
    Phân giải lần lượt từng họ địa chỉ.
    Lỗi của một họ được ghi vào kết quả của họ đó và không ảnh hưởng đến họ khác.

    Returns:
        List[ResolutionOutcome]: Kết quả theo đúng thứ tự của `families`.
    """
    outcomes = []
    for family in families:
        family = AddressFamily(family)
        try:
            outcomes.append(ResolutionOutcome(family=family, resolved=resolve(family)))
        except ResolveError as e:
            outcomes.append(ResolutionOutcome(family=family, error=str(e)))
    return outcomes
