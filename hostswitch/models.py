"""
HostSwitch 数据模型
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

SECTION_START = "####### HostSwitchStart"
SECTION_END = "####### HostSwitchEnd"


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class HostEntry:
    """
    代表受管区域中的单个条目

    属性:
        address: IP 地址（IPv4 或 IPv6 字面量）
        hostname: 要映射的主机名
        enabled: 是否启用；禁用的条目以注释行写入
        comment: 可选的行内注释
        id: 创建时分配的标识，不参与相等比较
    """

    address: str
    hostname: str
    enabled: bool = True
    comment: str = ""
    id: str = field(default_factory=_new_entry_id, compare=False)

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: [# ]<IP>\t<主机名>[ # <注释>]

        返回:
            格式化的 hosts 文件行
        """
        line = f"{self.address}\t{self.hostname}"
        if self.comment:
            line += f" # {self.comment}"
        if not self.enabled:
            line = f"# {line}"
        return line

    def toggled(self) -> "HostEntry":
        """返回切换启用状态后的副本（保留 id）"""
        return replace(self, enabled=not self.enabled)

    def __str__(self) -> str:
        state = "on" if self.enabled else "off"
        return f"{self.hostname} -> {self.address} ({state})"


@dataclass(frozen=True)
class SwitchState:
    """
    调用方持有的状态快照

    属性:
        entries: 当前受管条目，按文件顺序
        error_message: 最近一次失败的描述
        status_message: 正在进行或刚完成的操作描述
    """

    entries: Tuple[HostEntry, ...] = ()
    error_message: Optional[str] = None
    status_message: Optional[str] = None
