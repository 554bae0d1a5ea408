"""
受管区域合并模块

只重写两个标记行之间的内容，区域外的每一行按原顺序保留。
"""

from typing import List, Optional, Sequence

from hostswitch.models import HostEntry
from hostswitch.parser import SECTION_END, SECTION_START, split_lines

OWNERSHIP_COMMENT = "# Managed by HostSwitch - Do not edit manually"


def merge(raw_content: str, entries: Sequence[HostEntry]) -> str:
    """
    生成只替换了受管区域的新文件内容

    如果开始标记之后没有结束标记，之后的行不会再被复制（已知限制，
    写入前请用 find_unterminated_section 检查）。
    如果没有受管区域，则在文件末尾追加一个。

    参数:
        raw_content: hosts 文件原始文本
        entries: 当前内存中的条目列表

    返回:
        新的完整文件内容
    """
    serialized = [entry.to_hosts_line() for entry in entries]
    result: List[str] = []
    in_section = False
    found_section = False

    for line in split_lines(raw_content):
        if SECTION_START in line:
            found_section = True
            in_section = True
            result.append(line)
            result.extend(serialized)
            continue

        if SECTION_END in line:
            in_section = False
            result.append(line)
            continue

        # 区域内的旧行由上面重新序列化的条目替换
        if not in_section:
            result.append(line)

    if not found_section:
        # 保持原文件是否以换行结尾
        trailing_newline = len(result) > 0 and result[-1] == ""
        if trailing_newline:
            result.pop()
        result.append("")
        result.append(OWNERSHIP_COMMENT)
        result.append(SECTION_START)
        result.extend(serialized)
        result.append(SECTION_END)
        if trailing_newline:
            result.append("")

    return "\n".join(result)


def find_unterminated_section(raw_content: str) -> Optional[int]:
    """
    查找没有结束标记的受管区域

    返回:
        未闭合的开始标记所在行号（从 1 开始），没有则返回 None
    """
    open_line: Optional[int] = None
    for number, line in enumerate(split_lines(raw_content), start=1):
        if SECTION_START in line:
            if open_line is None:
                open_line = number
        elif SECTION_END in line:
            open_line = None
    return open_line
