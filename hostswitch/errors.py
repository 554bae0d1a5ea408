"""
HostSwitch 异常定义
"""


class HostSwitchError(Exception):
    """所有 HostSwitch 异常的基类"""


class HostsReadError(HostSwitchError):
    """无法读取 hosts 文件"""


class HostsWriteError(HostSwitchError):
    """无法写入 hosts 文件（权限被拒绝或写入失败）"""


class MalformedSectionError(HostSwitchError):
    """受管区域只有开始标记，没有结束标记"""

    def __init__(self, line_number: int):
        super().__init__(
            f"第 {line_number} 行的受管区域缺少结束标记，拒绝写入以免截断文件"
        )
        self.line_number = line_number


class InvalidEntryError(HostSwitchError, ValueError):
    """用户添加的条目无效"""


class EntryNotFoundError(HostSwitchError, KeyError):
    """找不到指定 id 的条目"""

    def __str__(self) -> str:
        return f"找不到条目: {self.args[0]}" if self.args else "找不到条目"
