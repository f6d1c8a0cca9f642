"""
类型化读写约定和格式化测试
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from easyio import FileMode, FormatArgumentError
from easyio.util import (
    format_message,
    is_readable,
    is_writable,
    parse_token,
    render_value,
)


class Temperature:
    """定义了__str__的类"""

    def __init__(self, degrees: float):
        self.degrees = degrees

    def __str__(self):
        return f"{self.degrees}C"


class Badge:
    """可渲染类型"""

    def render(self) -> str:
        return "<badge>"


class Pair:
    """可解析类型"""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right

    @classmethod
    def parse(cls, token: str) -> 'Pair':
        left, right = token.split(":")
        return cls(left, right)


class Suffix:
    """parse在缺少分隔符时抛出IndexError的类型"""

    def __init__(self, value: str):
        self.value = value

    @classmethod
    def parse(cls, token: str) -> 'Suffix':
        return cls(token.split("-")[1])


class TestWritable:
    """可写约定测试类"""

    @pytest.mark.parametrize("value", [
        "text", b"raw", bytearray(b"raw"), 1, 2.5, True, 1j,
        Decimal("1.10"), Fraction(1, 3), Temperature(20), Badge(), FileMode.READ,
    ])
    def test_is_writable(self, value):
        """测试可写值"""
        assert is_writable(value)

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}, object()])
    def test_is_not_writable(self, value):
        """测试不可写值"""
        assert not is_writable(value)

    def test_render_value(self):
        """测试渲染为字节"""
        assert render_value("é") == "é".encode("utf-8")
        assert render_value(b"\x00\xff") == b"\x00\xff"
        assert render_value(memoryview(b"mv")) == b"mv"
        assert render_value(Decimal("1.10")) == b"1.10"
        assert render_value(Temperature(20)) == b"20C"
        assert render_value(Badge()) == b"<badge>"

    def test_render_unwritable(self):
        """测试渲染不可写值"""
        with pytest.raises(TypeError):
            render_value([1, 2])


class TestReadable:
    """可读约定测试类"""

    @pytest.mark.parametrize("type_", [str, bytes, int, float, bool, Decimal, Fraction, Pair])
    def test_is_readable(self, type_):
        """测试可读类型"""
        assert is_readable(type_)

    @pytest.mark.parametrize("type_", [list, dict, Temperature, Badge])
    def test_is_not_readable(self, type_):
        """测试不可读类型"""
        assert not is_readable(type_)

    @pytest.mark.parametrize("token,type_,expected", [
        ("42", int, 42),
        ("-7", int, -7),
        ("2.5", float, 2.5),
        ("1.10", Decimal, Decimal("1.10")),
        ("1/3", Fraction, Fraction(1, 3)),
        ("TRUE", bool, True),
        ("no", bool, False),
        ("word", bytes, b"word"),
    ])
    def test_parse_token(self, token, type_, expected):
        """测试解析令牌"""
        assert parse_token(token, type_) == expected

    @pytest.mark.parametrize("token,type_", [
        ("abc", int),
        ("1.2.3", float),
        ("maybe", bool),
        ("x", Decimal),
        ("1/0", Fraction),
        ("nocolon", Pair),
    ])
    def test_parse_invalid_token(self, token, type_):
        """测试无法解析的令牌"""
        with pytest.raises(ValueError):
            parse_token(token, type_)

    def test_parse_lookup_error_is_parse_failure(self):
        """测试自定义parse抛出IndexError时归为解析失败"""
        assert parse_token("a-b", Suffix).value == "b"
        with pytest.raises(ValueError):
            parse_token("nodash", Suffix)

    def test_parse_custom_type(self):
        """测试解析自定义类型"""
        pair = parse_token("a:b", Pair)
        assert (pair.left, pair.right) == ("a", "b")

    def test_parse_unreadable_type(self):
        """测试解析不可读类型"""
        with pytest.raises(TypeError):
            parse_token("1", list)


class TestFormatMessage:
    """格式化测试类"""

    def test_positional_and_named(self):
        """测试位置参数和命名参数"""
        assert format_message("{} {name} {}", 1, 2, name="x") == "1 x 2"

    def test_explicit_indexes(self):
        """测试显式序号"""
        assert format_message("{1}{0}{1}", "a", "b") == "bab"

    def test_format_specifier(self):
        """测试格式说明"""
        assert format_message("{:>5.1f}|", 3.14159) == "  3.1|"

    def test_no_arguments(self):
        """测试无参数"""
        assert format_message("plain {{text}}") == "plain {text}"

    @pytest.mark.parametrize("fmt,args,kwargs", [
        ("{} {}", (1,), {}),
        ("{name}", (), {}),
        ("{}", (1, 2), {}),
        ("{a}", (), {"a": 1, "b": 2}),
        ("{", (), {}),
        ("{} {0}", (1,), {}),
        ("{:d}", ("text",), {}),
    ])
    def test_argument_mismatch(self, fmt, args, kwargs):
        """测试模板与参数不匹配"""
        with pytest.raises(FormatArgumentError):
            format_message(fmt, *args, **kwargs)

    def test_unwritable_argument(self):
        """测试不可写的参数"""
        with pytest.raises(TypeError):
            format_message("{}", [1, 2])


class TestFileMode:
    """打开模式测试类"""

    @pytest.mark.parametrize("code,expected", [
        ("r", FileMode.READ),
        ("w", FileMode.WRITE),
        ("a", FileMode.APPEND),
        ("rw", FileMode.READ_WRITE),
        ("R+", FileMode.READ_WRITE),
        (FileMode.APPEND, FileMode.APPEND),
    ])
    def test_get(self, code, expected):
        """测试根据代码获取模式"""
        assert FileMode.get(code) is expected

    def test_get_unknown(self):
        """测试未知代码"""
        with pytest.raises(ValueError):
            FileMode.get("rwx")

    def test_directions(self):
        """测试读写方向"""
        assert FileMode.READ.readable and not FileMode.READ.writable
        assert FileMode.WRITE.writable and not FileMode.WRITE.readable
        assert FileMode.APPEND.writable and not FileMode.APPEND.readable
        assert FileMode.READ_WRITE.readable and FileMode.READ_WRITE.writable
        assert FileMode.READ_WRITE.open_mode == "r+b"
        assert str(FileMode.APPEND) == "APPEND"
