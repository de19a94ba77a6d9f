"""\
Đây là script tiện ích để in ra địa chỉ IP đi ra (outgoing) mặc định
của máy tính, cho cả IPv4 và IPv6.

Địa chỉ này là địa chỉ nguồn mà hệ điều hành sẽ dùng khi gửi dữ liệu
ra Internet. Script không gửi bất kỳ gói tin nào.
"""

import sys

from configs import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    get_failure_message,
    get_format_failure_message,
)
from exceptions import FormatFailed
from resolver import resolve_all


def main() -> int:
    """
    Phân giải cả IPv4 và IPv6, in kết quả của từng họ địa chỉ.
    Luôn thử cả hai họ, dù họ kia có lỗi hay không.

    Returns:
        int: EXIT_SUCCESS nếu cả hai đều thành công, ngược lại EXIT_FAILURE.
    """
    retval = EXIT_SUCCESS

    for outcome in resolve_all():
        label = outcome.family.label
        if not outcome.ok:
            print(get_failure_message(label, outcome.error), file=sys.stderr)
            retval = EXIT_FAILURE
            continue

        try:
            print(outcome.resolved.message_string)
        except FormatFailed as e:
            print(get_format_failure_message(label, e), file=sys.stderr)
            retval = EXIT_FAILURE

    return retval


if __name__ == "__main__":
    """
    Điểm vào chính khi chạy file này trực tiếp.
    """
    sys.exit(main())
