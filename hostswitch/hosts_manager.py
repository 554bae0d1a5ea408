"""
Hosts 文件会话管理模块

持有当前条目快照，串行化写入，并在写入后重新读取确认状态。
"""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Sequence

from hostswitch.errors import (
    EntryNotFoundError,
    HostsReadError,
    HostSwitchError,
    MalformedSectionError,
)
from hostswitch.merger import find_unterminated_section, merge
from hostswitch.models import HostEntry, SwitchState
from hostswitch.parser import parse
from hostswitch.validation import is_system_entry, validate_entry
from hostswitch.writers import HostsWriter, read_hosts_file


class HostsFileManager:
    """
    管理受管条目的读取、修改和写入

    同一时间最多只有一个写入在进行。
    写入失败时重新读取磁盘内容，撤销内存中的乐观更新。
    """

    def __init__(self, hosts_path: str, writer: HostsWriter, logger: logging.Logger):
        """
        初始化 hosts 文件管理器

        参数:
            hosts_path: hosts 文件路径
            writer: 负责持久化新内容的写入器
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.writer = writer
        self.logger = logger
        self.lock = threading.RLock()

        self._entries: List[HostEntry] = []
        self._cached_content = ""
        self._error_message: Optional[str] = None
        self._status_message: Optional[str] = None

    @property
    def entries(self) -> List[HostEntry]:
        return list(self._entries)

    @property
    def state(self) -> SwitchState:
        """当前状态快照"""
        return SwitchState(
            entries=tuple(self._entries),
            error_message=self._error_message,
            status_message=self._status_message
        )

    def load(self) -> List[HostEntry]:
        """
        从磁盘读取并解析受管条目

        返回:
            解析出的条目列表

        异常:
            HostsReadError: 读取失败，此时内存中的条目保持不变
        """
        with self.lock:
            self._error_message = None
            try:
                content = read_hosts_file(self.hosts_path)
            except HostsReadError as e:
                self._error_message = str(e)
                self.logger.error(f"读取 hosts 文件失败: {e}")
                raise

            self._cached_content = content
            self._entries = parse(content)
            self.logger.debug(f"已加载 {len(self._entries)} 条受管记录")
            return self.entries

    def preview(self, entries: Optional[Sequence[HostEntry]] = None) -> str:
        """返回写入后的文件内容，不写入磁盘"""
        if entries is None:
            entries = self._entries
        return merge(self._cached_content, entries)

    def find_entry(self, entry_id: str) -> HostEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(entry_id)

    def toggle_entry(self, entry_id: str) -> HostEntry:
        """
        切换条目的启用状态并保存

        参数:
            entry_id: 条目 id

        返回:
            切换后的条目

        异常:
            EntryNotFoundError: 没有该 id 的条目
            HostSwitchError: 保存失败
        """
        target = self.find_entry(entry_id)
        toggled = target.toggled()
        new_entries = [toggled if e.id == entry_id else e for e in self._entries]

        action = "启用" if toggled.enabled else "禁用"
        self.logger.info(f"{action}主机记录: {toggled.hostname} -> {toggled.address}")
        self.save(new_entries)
        return toggled

    def add_entry(self, address: str, hostname: str, comment: str = "") -> HostEntry:
        """
        添加新条目并保存

        异常:
            InvalidEntryError: 条目无效
            HostSwitchError: 保存失败
        """
        entry = HostEntry(
            address=address.strip(),
            hostname=hostname.strip(),
            comment=comment.strip()
        )
        validate_entry(entry)

        if is_system_entry(entry):
            self.logger.warning(f"添加的条目与系统条目重名: {entry}")

        self.logger.info(f"添加主机记录: {entry.hostname} -> {entry.address}")
        self.save(self._entries + [entry])
        return entry

    def save(self, entries: Sequence[HostEntry]) -> None:
        """
        把条目写入 hosts 文件的受管区域

        参数:
            entries: 要写入的完整条目列表

        异常:
            HostsReadError: 写入前读取失败
            MalformedSectionError: 受管区域缺少结束标记
            HostsWriteError: 写入失败
        """
        with self.lock:
            self._error_message = None
            self._status_message = "正在更新 hosts 文件..."
            # 乐观更新，失败时重新读取
            self._entries = list(entries)

            try:
                # 1. 重新读取磁盘上的最新内容
                original = read_hosts_file(self.hosts_path)

                # 2. 检查受管区域是否完整
                open_line = find_unterminated_section(original)
                if open_line is not None:
                    raise MalformedSectionError(open_line)

                # 3. 合并并写入
                new_content = merge(original, entries)
                self.writer.write(new_content)

            except HostSwitchError as e:
                self._status_message = None
                self.logger.error(f"更新 hosts 文件失败: {e}")
                self._reload()
                self._error_message = str(e)
                raise

            self._status_message = "Hosts 文件更新成功"
            self.logger.info(f"已更新 {len(entries)} 条受管记录")

            # 4. 重新解析确认状态
            self._reload()

    def _reload(self) -> None:
        try:
            self.load()
        except HostsReadError:
            self.logger.warning("无法重新读取 hosts 文件，内存条目可能与磁盘不一致")
