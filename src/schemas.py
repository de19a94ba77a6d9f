"""\
Module này định nghĩa các cấu trúc dữ liệu (lược đồ) của ứng dụng,
sử dụng thư viện Pydantic.

Các mô hình (Models) này đảm bảo rằng địa chỉ trả về luôn đúng với
họ địa chỉ được yêu cầu (4 byte cho IPv4, 16 byte cho IPv6).
"""

import socket
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple, Union

from pydantic import BaseModel, model_validator

from configs import IPV4_REMOTE_HOST, IPV6_REMOTE_HOST, get_success_message
from exceptions import FormatFailed


class AddressFamily(str, Enum):
    """Enum các họ địa chỉ mà công cụ có thể phân giải."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def socket_family(self) -> int:
        """Hằng số họ địa chỉ của module socket (AF_INET hoặc AF_INET6)."""
        if self is AddressFamily.IPV4:
            return socket.AF_INET
        return socket.AF_INET6

    @property
    def version(self) -> int:
        return 4 if self is AddressFamily.IPV4 else 6

    @property
    def label(self) -> str:
        """Nhãn để hiển thị, ví dụ: 'IPv4'."""
        return f"IPv{self.version}"

    @property
    def remote_host(self) -> str:
        """Địa chỉ đích cố định (dành cho tài liệu) của họ địa chỉ này."""
        if self is AddressFamily.IPV4:
            return IPV4_REMOTE_HOST
        return IPV6_REMOTE_HOST


class RemoteEndpoint(BaseModel):
    """Địa chỉ và cổng đích mà socket sẽ 'kết nối' tới."""

    host: str
    port: int

    @property
    def sockaddr(self) -> Tuple[str, int]:
        """Bộ (host, port) truyền vào socket.connect()."""
        return (self.host, self.port)


class ResolvedAddress(BaseModel):
    """
    Mô hình cho một địa chỉ IP đi ra mặc định đã được xác định.
    Đây là kết quả của resolver.resolve().
    """

    family: AddressFamily
    address: Union[IPv4Address, IPv6Address]

    @model_validator(mode="after")
    def check_version(self) -> "ResolvedAddress":
        # Phiên bản của địa chỉ phải khớp với họ địa chỉ
        if self.address.version != self.family.version:
            raise ValueError(
                f"{self.family.label} result holds an IPv{self.address.version} address"
            )
        return self

    @property
    def packed(self) -> bytes:
        """Giá trị nhị phân: 4 byte (big-endian) cho IPv4, 16 byte cho IPv6."""
        return self.address.packed

    @property
    def text(self) -> str:
        """
        Chuyển địa chỉ nhị phân sang dạng chuỗi (dấu chấm hoặc dấu hai chấm).

        Raises:
            FormatFailed: Nếu hệ điều hành không chuyển đổi được.
        """
        try:
            return socket.inet_ntop(self.family.socket_family, self.packed)
        except (OSError, ValueError) as e:
            raise FormatFailed.from_error(self.family.label, e) from e

    @property
    def message_string(self) -> str:
        """Dòng thông báo thành công, sẵn sàng để in ra màn hình."""
        return get_success_message(self.family.label, self.text)


class ResolutionOutcome(BaseModel):
    """Kết quả phân giải của một họ địa chỉ: có địa chỉ, hoặc có lỗi."""

    family: AddressFamily
    resolved: Optional[ResolvedAddress] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.resolved is not None
