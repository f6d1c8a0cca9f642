"""
easyio - 控制台与文件I/O便捷库
提供格式化的控制台交互和带作用域管理的文件流
"""

__version__ = "1.0.0"
__author__ = "easyio Team"

from .core.file_stream import FileStream
from .core.console import Console
from .core.file_util import read_file, write_file, append_file, read_lines
from .domain.file_mode import FileMode
from .domain.errors import EasyIOError, StreamMovedError, FormatArgumentError
from .util.typed_io import Renderable, Parsable

__all__ = [
    'FileStream',
    'Console',
    'FileMode',
    'EasyIOError',
    'StreamMovedError',
    'FormatArgumentError',
    'Renderable',
    'Parsable',
    'read_file',
    'write_file',
    'append_file',
    'read_lines'
]
