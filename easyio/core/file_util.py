"""
文件便捷函数
每个函数在一个with块内打开FileStream，完成后自动关闭
"""

import os
from typing import Any, List, Union

from ..domain.file_mode import FileMode
from .file_stream import FileStream

PathType = Union[str, os.PathLike]


def read_file(path: PathType) -> bytes:
    """读取整个文件"""
    with FileStream(path, FileMode.READ) as f:
        return f.read_all()


def write_file(path: PathType, content: Any):
    """
    写入文件，已有内容会被截断

    Args:
        path: 文件路径
        content: 满足可写约定的内容
    """
    with FileStream(path, FileMode.WRITE) as f:
        f.write(content)


def append_file(path: PathType, content: Any):
    """追加到文件末尾，不插入分隔符"""
    with FileStream(path, FileMode.APPEND) as f:
        f.write(content)


def read_lines(path: PathType) -> List[bytes]:
    """
    读取所有行

    Args:
        path: 文件路径

    Returns:
        按文件顺序排列、去掉换行符的行列表
    """
    with FileStream(path, FileMode.READ) as f:
        return list(f)
