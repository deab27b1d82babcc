"""
Namespace Module.

Configuration tree nodes, settings and deferred setting blocks.
"""

from .setting_block import SettingBlock
from .setting import Setting
from .namespace import Namespace

__all__ = [
    "SettingBlock",
    "Setting",
    "Namespace",
]
