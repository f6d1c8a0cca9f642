"""
类型化读写约定
"可写" 约定决定哪些值可以渲染到输出流，"可读" 约定决定哪些类型可以从输入令牌解析
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Protocol, runtime_checkable

# str值渲染为字节时使用的编码
DEFAULT_ENCODING = "utf-8"

WHITESPACE = b" \t\n\r\v\f"

_BYTE_TYPES = (bytes, bytearray, memoryview)
_SCALAR_TYPES = (str, int, float, complex, Decimal, Fraction) + _BYTE_TYPES

_BOOL_TOKENS = {
    "1": True, "true": True, "yes": True,
    "0": False, "false": False, "no": False,
}


@runtime_checkable
class Renderable(Protocol):
    """可以渲染为文本的对象"""

    def render(self) -> str:
        ...


@runtime_checkable
class Parsable(Protocol):
    """可以从单个令牌解析出实例的类型"""

    @classmethod
    def parse(cls, token: str) -> Any:
        ...


def _parse_bool(token: str) -> bool:
    try:
        return _BOOL_TOKENS[token.lower()]
    except KeyError:
        raise ValueError(f"Invalid boolean token: {token!r}")


_PARSERS: Dict[type, Callable[[str], Any]] = {
    str: str,
    bytes: lambda token: token.encode(DEFAULT_ENCODING),
    int: int,
    float: float,
    bool: _parse_bool,
    Decimal: Decimal,
    Fraction: Fraction,
}


def is_writable(value: Any) -> bool:
    """
    判断值是否满足可写约定

    标量、字节序列、Renderable对象，以及自己定义了__str__的类的实例都是可写的
    """
    if isinstance(value, _SCALAR_TYPES) or isinstance(value, Renderable):
        return True
    return type(value).__str__ is not object.__str__


def is_readable(type_: Any) -> bool:
    """判断类型是否满足可读约定"""
    if type_ in _PARSERS:
        return True
    return isinstance(type_, type) and isinstance(type_, Parsable)


def render_value(value: Any) -> bytes:
    """
    将可写值渲染为字节

    Args:
        value: 要渲染的值

    Returns:
        渲染后的字节，字节序列原样返回，文本按DEFAULT_ENCODING编码
    """
    if isinstance(value, _BYTE_TYPES):
        return bytes(value)
    if not is_writable(value):
        raise TypeError(f"Value of type {type(value).__name__} is not writable")
    if isinstance(value, Renderable):
        text = value.render()
    else:
        text = str(value)
    return text.encode(DEFAULT_ENCODING)


def parse_token(token: str, type_: Any) -> Any:
    """
    将令牌解析为指定类型

    Args:
        token: 不含空白的输入令牌
        type_: 目标类型

    Returns:
        解析后的值

    Raises:
        TypeError: 类型不满足可读约定
        ValueError: 令牌无法解析为该类型，parse抛出的LookupError和TypeError也归为此类
    """
    parser = _PARSERS.get(type_)
    if parser is None:
        if not is_readable(type_):
            raise TypeError(f"Type {getattr(type_, '__name__', type_)!r} is not readable")
        parser = type_.parse

    try:
        return parser(token)
    except (ValueError, ArithmeticError, LookupError, TypeError) as e:
        raise ValueError(f"Cannot parse {token!r} as {type_.__name__}: {e}") from e
