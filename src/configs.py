"""\
Module này chứa tất cả các biến cấu hình, hằng số và các chuỗi thông báo
được dùng chung bởi bộ phân giải (resolver) và script in địa chỉ IP.

Việc tập trung tất cả các cấu hình vào một file giúp cho việc
quản lý, thay đổi và bảo trì ứng dụng trở nên dễ dàng hơn.
"""

# --- Cài đặt địa chỉ đích (remote) ---
# Không có gói tin nào thực sự được gửi đi với UDP, nên cổng chỉ cần "trông hợp lệ".
REMOTE_PORT = 53  # Cổng DNS

# Khối TEST-NET-3, chỉ dành cho tài liệu (RFC 5737)
IPV4_REMOTE_HOST = "203.0.113.1"
# Tiền tố 2001:db8::/32, chỉ dành cho tài liệu (RFC 3849)
IPV6_REMOTE_HOST = "2001:db8::1"

# --- Mã thoát (exit status) ---
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def get_success_message(label: str, address: str) -> str:
    """
    Tạo dòng thông báo khi lấy được địa chỉ IP mặc định.

    Args:
        label (str): Nhãn của họ địa chỉ ("IPv4" hoặc "IPv6").
        address (str): Địa chỉ đã được chuyển sang dạng chuỗi.

    Returns:
        str: Dòng thông báo thành công.
    """
    return f"Successfully retrieved default outgoing {label} address: {address}"


def get_format_failure_message(label: str, error: Exception) -> str:
    """Thông báo khi lấy được địa chỉ nhưng không chuyển được sang chuỗi."""
    return (
        f"Successfully retrieved default outgoing {label} address "
        f"but failed to print it: {error}"
    )


def get_failure_message(label: str, error: str) -> str:
    """Thông báo khi không lấy được địa chỉ của một họ địa chỉ."""
    return f"cannot retrieve outgoing {label} address: {error}"
