"""
工具模块 - 类型化读写约定和格式化
"""

from .typed_io import (
    DEFAULT_ENCODING,
    Renderable,
    Parsable,
    is_writable,
    is_readable,
    render_value,
    parse_token,
)
from .format_util import StrictFormatter, format_message

__all__ = [
    'DEFAULT_ENCODING',
    'Renderable',
    'Parsable',
    'is_writable',
    'is_readable',
    'render_value',
    'parse_token',
    'StrictFormatter',
    'format_message'
]
