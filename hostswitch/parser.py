"""
受管区域解析模块

从 hosts 文件原始文本中提取两个标记行之间的条目。
"""

import re
from typing import List, Optional

from hostswitch.models import SECTION_END, SECTION_START, HostEntry
from hostswitch.validation import is_valid_address, is_valid_hostname

_NEWLINE = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> List[str]:
    """按任意换行约定拆分；末尾换行会产生一个空字符串元素"""
    return _NEWLINE.split(content)


def _parse_line(line: str) -> Optional[HostEntry]:
    enabled = True
    working = line
    if working.startswith("#"):
        enabled = False
        working = working[1:].strip()

    tokens = working.split()
    if len(tokens) < 2:
        return None

    address, hostname = tokens[0], tokens[1]
    _, marker, rest = working.partition("#")
    comment = rest.strip() if marker else ""

    if not (is_valid_address(address) or is_valid_hostname(hostname)):
        return None
    return HostEntry(address=address, hostname=hostname, enabled=enabled, comment=comment)


def parse(raw_content: str) -> List[HostEntry]:
    """
    解析受管区域中的条目

    区域外的行完全不检查。区域内的空行和 "##" 开头的行被跳过，
    无法解析的行被静默丢弃以容忍手工编辑。

    参数:
        raw_content: hosts 文件原始文本

    返回:
        按文件顺序排列的 HostEntry 列表
    """
    entries: List[HostEntry] = []
    in_section = False

    for raw_line in split_lines(raw_content):
        line = raw_line.strip()

        if SECTION_START in line:
            in_section = True
            continue
        if SECTION_END in line:
            in_section = False
            continue
        if not in_section:
            continue
        if not line or line.startswith("##"):
            continue

        entry = _parse_line(line)
        if entry is not None:
            entries.append(entry)

    return entries
