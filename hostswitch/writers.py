"""
Hosts 文件读写模块，支持原子性更新和提权写入
"""

import logging
import os
import stat
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from hostswitch.errors import HostsReadError, HostsWriteError

DEFAULT_MODE = 0o644

# $1 = 临时文件, $2 = 目标文件；先复制到同目录再重命名，保证原子性
# 沿用目标文件的权限位；失败时删除同目录的临时文件
_INSTALL_SCRIPT = (
    'tmp="$2.hostswitch.tmp"; '
    'mode=$(stat -c %a "$2" 2>/dev/null || stat -f %Lp "$2" 2>/dev/null || echo 644); '
    'if cp "$1" "$tmp" && chmod "$mode" "$tmp" && mv -f "$tmp" "$2"; then exit 0; fi; '
    'rm -f "$tmp"; exit 1'
)


def read_hosts_file(hosts_path: Path) -> str:
    """
    读取 hosts 文件原始文本

    异常:
        HostsReadError: 文件不存在或无法读取
    """
    try:
        with open(hosts_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except FileNotFoundError as e:
        raise HostsReadError(f"Hosts 文件不存在: {hosts_path}") from e
    except PermissionError as e:
        raise HostsReadError(f"读取 hosts 文件权限被拒绝: {hosts_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise HostsReadError(f"读取 hosts 文件时出错: {e}") from e


class HostsWriter(Protocol):
    """把新内容持久化到 hosts 文件；失败时抛出 HostsWriteError 且不留下部分写入"""

    def write(self, content: str) -> None:
        ...


class AtomicFileWriter:
    """
    直接写入 hosts 文件（临时文件 + 重命名）

    适用于进程本身已有写权限的场景。
    """

    def __init__(self, hosts_path: Path, logger: logging.Logger):
        self.hosts_path = Path(hosts_path)
        self.logger = logger

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self.hosts_path).st_mode)
        except FileNotFoundError:
            return DEFAULT_MODE

    def write(self, content: str) -> None:
        """
        原子性写入新内容

        异常:
            HostsWriteError: 如果文件系统操作失败
        """
        try:
            temp_fd, temp_path = tempfile.mkstemp(
                dir=self.hosts_path.parent,
                prefix='.hosts.tmp.',
                text=True
            )
        except OSError as e:
            raise HostsWriteError(f"无法创建临时文件: {e}") from e

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
            os.chmod(temp_path, self._target_mode())

            # 原子性替换（同一文件系统内有效）
            os.replace(temp_path, self.hosts_path)
            self.logger.debug(f"已写入 {self.hosts_path}")

        except OSError as e:
            # 出错时清理临时文件
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            if isinstance(e, PermissionError):
                raise HostsWriteError(f"写入 hosts 文件权限被拒绝: {self.hosts_path}") from e
            raise HostsWriteError(f"写入 hosts 文件失败: {e}") from e


class PrivilegedCommandWriter:
    """
    通过提权命令（sudo、pkexec 等）写入 hosts 文件

    新内容先写入普通临时文件，再由提权的 shell 复制到目标目录并重命名。
    """

    def __init__(
        self,
        hosts_path: Path,
        elevate: Sequence[str],
        logger: logging.Logger,
        timeout: Optional[float] = None
    ):
        """
        参数:
            hosts_path: hosts 文件路径
            elevate: 提权命令前缀，例如 ["sudo"] 或 ["pkexec"]
            logger: 日志记录器实例
            timeout: 等待授权和写入的最长秒数
        """
        self.hosts_path = Path(hosts_path)
        self.elevate = list(elevate)
        self.logger = logger
        self.timeout = timeout

    def build_command(self, temp_path: str) -> List[str]:
        return [
            *self.elevate,
            'sh', '-c', _INSTALL_SCRIPT, 'sh',
            temp_path, str(self.hosts_path)
        ]

    def write(self, content: str) -> None:
        """
        以管理员权限写入新内容

        异常:
            HostsWriteError: 授权被拒绝或命令失败
        """
        temp_fd, temp_path = tempfile.mkstemp(prefix='hostswitch.', text=True)
        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8', newline='') as f:
                f.write(content)

            command = self.build_command(temp_path)
            self.logger.debug(f"执行提权写入: {' '.join(self.elevate)}")
            try:
                completed = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout
                )
            except (OSError, subprocess.TimeoutExpired) as e:
                raise HostsWriteError(f"无法执行提权命令: {e}") from e

            if completed.returncode != 0:
                detail = completed.stderr.strip() or f"退出码 {completed.returncode}"
                raise HostsWriteError(f"更新失败: {detail}")

        finally:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
