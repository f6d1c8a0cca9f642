"""
文件打开模式枚举
"""

from enum import Enum
from typing import Union


class FileMode(Enum):
    """文件打开模式枚举"""
    READ = "rb"
    WRITE = "wb"
    APPEND = "ab"
    READ_WRITE = "r+b"

    @classmethod
    def get(cls, code: Union['FileMode', str]) -> 'FileMode':
        """
        根据代码获取打开模式

        Args:
            code: FileMode或简写代码 (r, w, a, rw, r+)

        Returns:
            对应的打开模式枚举值
        """
        if isinstance(code, cls):
            return code
        mode = _MODE_CODES.get(str(code).lower())
        if mode is None:
            raise ValueError(f"Unknown file mode: {code!r}")
        return mode

    @property
    def open_mode(self) -> str:
        """传给open()的模式字符串，总是二进制模式"""
        return self.value

    @property
    def readable(self) -> bool:
        return self in (FileMode.READ, FileMode.READ_WRITE)

    @property
    def writable(self) -> bool:
        return self is not FileMode.READ

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"FileMode.{self.name}"


_MODE_CODES = {
    "r": FileMode.READ,
    "w": FileMode.WRITE,
    "a": FileMode.APPEND,
    "rw": FileMode.READ_WRITE,
    "r+": FileMode.READ_WRITE,
}
