#!/usr/bin/env python3
"""
HostSwitch - 主入口点

在 /etc/hosts 的受管区域中切换主机记录。
"""

import sys
from pathlib import Path

# 将当前目录添加到路径以导入 hostswitch 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostswitch.cli import app


def main() -> None:
    app(prog_name="hostswitch")


if __name__ == '__main__':
    main()
