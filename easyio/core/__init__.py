"""
核心模块 - 文件流、控制台和文件便捷函数
"""

from .file_stream import FileStream
from .console import Console
from .file_util import read_file, write_file, append_file, read_lines

__all__ = [
    'FileStream',
    'Console',
    'read_file',
    'write_file',
    'append_file',
    'read_lines'
]
