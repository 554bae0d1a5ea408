import logging
from pathlib import Path
from typing import List, Optional

import pytest

from hostswitch.errors import HostsWriteError
from hostswitch.parser import SECTION_END, SECTION_START

SYSTEM_LINES = "##\n# Host Database\n127.0.0.1\tlocalhost\n255.255.255.255\tbroadcasthost\n::1\tlocalhost\n"


class FakeWriter:
    """写入 tmp_path 中的文件，可模拟授权失败。"""

    def __init__(self, path: Path, fail_with: Optional[str] = None) -> None:
        self.path = path
        self.fail_with = fail_with
        self.written: List[str] = []

    def write(self, content: str) -> None:
        if self.fail_with is not None:
            raise HostsWriteError(self.fail_with)
        self.written.append(content)
        self.path.write_text(content, encoding="utf-8")


@pytest.fixture()
def logger() -> logging.Logger:
    return logging.getLogger("hostswitch.test")


@pytest.fixture()
def hosts_file(tmp_path: Path) -> Path:
    p = tmp_path / "hosts"
    p.write_text(
        SYSTEM_LINES
        + "\n"
        + f"{SECTION_START}\n"
        + "10.0.0.1\tdev.local # api\n"
        + "# 10.0.0.2\tstaging.local\n"
        + f"{SECTION_END}\n"
        + "192.168.1.5\tprinter\n",
        encoding="utf-8",
    )
    return p
