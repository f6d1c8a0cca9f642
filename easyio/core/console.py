"""
控制台交互类
对标准输入输出的无状态封装，复用文件流的类型化读取和格式化写入约定
"""

import logging
import sys
from typing import Any

from ..domain.errors import EasyIOError
from ..util.format_util import format_message
from ..util.typed_io import is_readable, parse_token

logger = logging.getLogger(__name__)


class Console:
    """控制台交互类，所有方法都是静态方法，每次调用时才取sys.stdin/sys.stdout"""

    @staticmethod
    def print(fmt: str, *args: Any, **kwargs: Any):
        """
        格式化输出

        Args:
            fmt: 格式模板
            *args: 位置参数
            **kwargs: 命名参数
        """
        text = format_message(fmt, *args, **kwargs)
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def println(fmt: str = "", *args: Any, **kwargs: Any):
        """格式化输出并换行"""
        text = format_message(fmt, *args, **kwargs)
        sys.stdout.write(text + "\n")
        sys.stdout.flush()

    @staticmethod
    def read_line() -> str:
        """
        从标准输入读取一行

        Returns:
            去掉换行符的一行

        Raises:
            EasyIOError: 输入已结束
        """
        line = sys.stdin.readline()
        if not line:
            logger.error("Console input exhausted")
            raise EasyIOError("Failed to read from console", operation="read_line")
        if line.endswith("\n"):
            line = line[:-1]
        return line

    @staticmethod
    def read(type_: Any) -> Any:
        """
        读取一个值

        跳过空行，解析下一行的第一个令牌，并丢弃该行剩余内容，
        这样之后按行读取不会读到残留的空白

        Args:
            type_: 目标类型，必须满足可读约定

        Returns:
            解析后的值

        Raises:
            EasyIOError: 输入已结束或令牌无法解析
        """
        if not is_readable(type_):
            raise TypeError(f"Type {getattr(type_, '__name__', type_)!r} is not readable")

        while True:
            line = sys.stdin.readline()
            if not line:
                logger.error("Console input exhausted while reading a value")
                raise EasyIOError("Failed to read value from console", operation="read")
            tokens = line.split()
            if tokens:
                break

        try:
            return parse_token(tokens[0], type_)
        except ValueError as e:
            logger.error(f"Invalid console input {tokens[0]!r}: {e}")
            raise EasyIOError(f"Failed to read value from console: {e}", operation="read") from e

    @staticmethod
    def prompt(message: str, type_: Any = str) -> Any:
        """
        输出提示后读取一个值

        Args:
            message: 提示文本，原样输出，不追加换行
            type_: 目标类型

        Returns:
            解析后的值
        """
        sys.stdout.write(message)
        sys.stdout.flush()
        return Console.read(type_)
