"""\
Các ngoại lệ (exception) có thể xảy ra khi xác định địa chỉ IP đi ra mặc định.

Mỗi lớp tương ứng với một bước của quá trình phân giải. Lỗi của một họ
địa chỉ (IPv4 hoặc IPv6) không bao giờ ảnh hưởng đến họ còn lại.
"""

from typing import Optional


class ResolveError(Exception):
    """
    Lớp cơ sở cho mọi lỗi trong quá trình phân giải.

    Attributes:
        label (str): Nhãn của họ địa chỉ ("IPv4" hoặc "IPv6").
        errno (int | None): Mã lỗi hệ thống (nếu có).
        strerror (str | None): Mô tả lỗi hệ thống (nếu có).
    """

    step = "resolve"  # Tên bước bị lỗi, được ghi đè ở các lớp con

    def __init__(
        self, label: str, errno: Optional[int] = None, strerror: Optional[str] = None
    ):
        super().__init__(label, errno, strerror)
        self.label = label
        self.errno = errno
        self.strerror = strerror

    @classmethod
    def from_error(cls, label: str, error: Exception) -> "ResolveError":
        """
        Tạo ngoại lệ từ một lỗi gốc (thường là OSError).
        Giữ lại mã lỗi và thông điệp của hệ điều hành.
        """
        if isinstance(error, OSError):
            return cls(label, error.errno, error.strerror or str(error))
        return cls(label, None, str(error))

    def __str__(self) -> str:
        msg = f"{self.label} {self.step} failed"
        if self.errno is not None:
            return f"{msg}: [Errno {self.errno}] {self.strerror}"
        if self.strerror:
            return f"{msg}: {self.strerror}"
        return msg


class SocketCreateFailed(ResolveError):
    """Không tạo được socket UDP (hết tài nguyên, không có quyền, ...)."""

    step = "socket creation"


class UnavailableFamily(SocketCreateFailed):
    """Máy không hỗ trợ họ địa chỉ này (ví dụ: IPv6 bị tắt trong kernel)."""

    step = "socket creation (address family unavailable)"


class AddressParseFailed(ResolveError):
    """Địa chỉ đích cố định không hợp lệ. Gần như không thể xảy ra."""

    step = "remote address parsing"


class AssociationFailed(ResolveError):
    """
    Lệnh connect() thất bại.
    Thường có nghĩa là máy không có đường đi ra ngoài cho họ địa chỉ này.
    """

    step = "connect"


class LocalAddressQueryFailed(ResolveError):
    """Lệnh getsockname() thất bại. Đây là lỗi không mong đợi."""

    step = "getsockname"


class FormatFailed(ResolveError):
    """Không chuyển được địa chỉ nhị phân sang dạng chuỗi."""

    step = "address formatting"


# Tên gọi khác theo ý nghĩa của lỗi
NoRoute = AssociationFailed
InternalError = LocalAddressQueryFailed
