"""
HostSwitch 主应用模块
"""

import logging
import sys
from typing import List

from hostswitch.config import Config
from hostswitch.hosts_manager import HostsFileManager
from hostswitch.models import HostEntry
from hostswitch.writers import AtomicFileWriter, HostsWriter, PrivilegedCommandWriter


class HostSwitch:
    """
    主应用控制器，协调所有组件

    - 配置日志
    - 根据配置选择写入器（直接写入或提权写入）
    - 对外提供列出、添加、切换和预览操作
    """

    def __init__(self, config: Config):
        """
        初始化 HostSwitch 应用

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()
        self.writer = self._create_writer()
        self.hosts_manager = HostsFileManager(
            config.hosts_file_path,
            self.writer,
            self.logger
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostswitch')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        # 输出到 stderr，stdout 留给命令结果
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def _create_writer(self) -> HostsWriter:
        elevate = self.config.elevate_args
        if not elevate:
            self.logger.debug("未配置提权命令，直接写入 hosts 文件")
            return AtomicFileWriter(self.config.hosts_file_path, self.logger)

        self.logger.debug(f"使用提权命令写入: {self.config.elevate_command}")
        return PrivilegedCommandWriter(
            self.config.hosts_file_path,
            elevate,
            self.logger
        )

    def list_entries(self) -> List[HostEntry]:
        """重新读取 hosts 文件并返回受管条目"""
        return self.hosts_manager.load()

    def add(self, address: str, hostname: str, comment: str = "") -> HostEntry:
        self.hosts_manager.load()
        return self.hosts_manager.add_entry(address, hostname, comment)

    def toggle(self, index: int) -> HostEntry:
        """
        按列表中的位置切换条目

        参数:
            index: 从 1 开始的位置，与 list 输出一致

        异常:
            IndexError: 位置超出范围
        """
        entries = self.hosts_manager.load()
        if not 1 <= index <= len(entries):
            raise IndexError(f"没有第 {index} 条记录（共 {len(entries)} 条）")
        return self.hosts_manager.toggle_entry(entries[index - 1].id)

    def preview(self) -> str:
        """返回按当前条目重建后的文件内容"""
        self.hosts_manager.load()
        return self.hosts_manager.preview()
