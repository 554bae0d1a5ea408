"""
条目校验工具

只做模式匹配，不做 DNS 解析或连通性检查。
"""

import re

from hostswitch.errors import InvalidEntryError
from hostswitch.models import SECTION_END, SECTION_START, HostEntry

_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(rf"({_OCTET}\.){{3}}{_OCTET}")
IPV6_PATTERN = re.compile(r"([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}|::1|::")

SYSTEM_HOSTNAMES = frozenset({"localhost", "broadcasthost"})
SYSTEM_PAIRS = frozenset({
    ("127.0.0.1", "localhost"),
    ("::1", "localhost"),
    ("255.255.255.255", "broadcasthost"),
})

_FORBIDDEN = re.compile(r"[\s#]")


def is_valid_address(address: str) -> bool:
    """严格匹配 IPv4 点分四段或 IPv6 八组（以及 ::1、::）"""
    return bool(IPV4_PATTERN.fullmatch(address) or IPV6_PATTERN.fullmatch(address))


def is_valid_hostname(hostname: str) -> bool:
    return bool(hostname) and hostname != "#"


def is_system_entry(entry: HostEntry) -> bool:
    """是否为系统自带的条目（localhost、broadcasthost）"""
    return (
        entry.hostname in SYSTEM_HOSTNAMES
        or (entry.address, entry.hostname) in SYSTEM_PAIRS
    )


def validate_entry(entry: HostEntry) -> None:
    """
    写入前校验用户添加的条目

    任何会破坏序列化往返的内容都会被拒绝。

    参数:
        entry: 待校验的条目

    异常:
        InvalidEntryError: 条目无效
    """
    if not is_valid_address(entry.address):
        raise InvalidEntryError(f"无效的 IP 地址: {entry.address!r}")
    if not is_valid_hostname(entry.hostname):
        raise InvalidEntryError(f"无效的主机名: {entry.hostname!r}")
    if _FORBIDDEN.search(entry.hostname):
        raise InvalidEntryError(f"主机名不能包含空白或 '#': {entry.hostname!r}")
    if entry.comment != entry.comment.strip() or any(
        c in entry.comment for c in "\r\n"
    ):
        raise InvalidEntryError("注释不能包含换行符或首尾空白")
    for marker in (SECTION_START, SECTION_END):
        if marker in entry.hostname or marker in entry.comment:
            raise InvalidEntryError(f"主机名和注释不能包含受管区域标记: {marker!r}")
