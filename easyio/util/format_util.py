"""
格式化工具
基于str.format语法，参数个数不匹配时在写出之前报错
"""

import string
from typing import Any

from ..domain.errors import FormatArgumentError
from .typed_io import is_writable


class StrictFormatter(string.Formatter):
    """不允许多余参数的格式化器"""

    def check_unused_args(self, used_args, args, kwargs):
        unused = [str(i) for i in range(len(args)) if i not in used_args]
        unused += [name for name in kwargs if name not in used_args]
        if unused:
            raise FormatArgumentError(f"Unused format arguments: {', '.join(unused)}")


_formatter = StrictFormatter()


def format_message(fmt: str, *args: Any, **kwargs: Any) -> str:
    """
    将参数按从左到右的顺序代入格式模板

    Args:
        fmt: 格式模板，如 "{} = {value}"
        *args: 位置参数
        **kwargs: 命名参数

    Returns:
        渲染后的字符串
    """
    for value in list(args) + list(kwargs.values()):
        if not is_writable(value):
            raise TypeError(f"Format argument of type {type(value).__name__} is not writable")

    try:
        return _formatter.vformat(fmt, args, kwargs)
    except FormatArgumentError:
        raise
    except (IndexError, KeyError) as e:
        raise FormatArgumentError(f"Missing format argument {e} for template {fmt!r}") from e
    except ValueError as e:
        raise FormatArgumentError(f"Invalid format template {fmt!r}: {e}") from e
