"""
HostSwitch - 在 /etc/hosts 的受管区域中维护可切换的主机记录
"""

__version__ = "1.0.0"
__author__ = "HostSwitch Project"

from hostswitch.app import HostSwitch
from hostswitch.config import Config
from hostswitch.merger import merge
from hostswitch.models import HostEntry
from hostswitch.parser import parse
from hostswitch.validation import is_valid_address, is_valid_hostname

__all__ = [
    "HostSwitch",
    "Config",
    "HostEntry",
    "parse",
    "merge",
    "is_valid_address",
    "is_valid_hostname",
]
