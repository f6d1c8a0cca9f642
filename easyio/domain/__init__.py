"""
数据模型模块 - 打开模式和异常定义
"""

from .file_mode import FileMode
from .errors import EasyIOError, StreamMovedError, FormatArgumentError

__all__ = [
    'FileMode',
    'EasyIOError',
    'StreamMovedError',
    'FormatArgumentError'
]
