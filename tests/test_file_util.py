"""
文件便捷函数测试
"""

from unittest.mock import patch

import pytest

from easyio import (
    EasyIOError,
    FileMode,
    append_file,
    read_file,
    read_lines,
    write_file,
)


class TestReadWriteFile:
    """整体读写测试类"""

    @pytest.mark.parametrize("content", [
        b"",
        b"plain text",
        b"line one\nline two\n",
        b"\x00null\x00bytes\x00",
        "中文内容\r\n".encode("utf-8"),
    ])
    def test_round_trip(self, tmp_path, content):
        """测试写入后读取内容一致"""
        path = tmp_path / "data.bin"
        write_file(path, content)
        assert read_file(path) == content

    def test_write_file_truncates(self, tmp_path):
        """测试覆盖写入截断原有内容"""
        path = tmp_path / "data.txt"
        write_file(path, "abcdef")
        write_file(path, "ab")
        assert read_file(path) == b"ab"

    def test_write_file_renders_values(self, tmp_path):
        """测试写入非字符串值"""
        path = tmp_path / "data.txt"
        write_file(path, 42)
        assert read_file(path) == b"42"

    def test_append_file(self, tmp_path):
        """测试追加不插入分隔符"""
        path = tmp_path / "data.txt"
        append_file(path, b"first")
        append_file(path, "second")
        assert read_file(path) == b"firstsecond"

    def test_read_missing_file(self, tmp_path):
        """测试读取不存在的文件"""
        with pytest.raises(EasyIOError):
            read_file(tmp_path / "missing.txt")
        with pytest.raises(EasyIOError):
            read_lines(tmp_path / "missing.txt")

    def test_read_file_closes_stream(self):
        """测试读取后关闭文件流"""
        with patch('easyio.core.file_util.FileStream') as mock_stream:
            stream = mock_stream.return_value.__enter__.return_value
            stream.read_all.return_value = b"data"

            assert read_file("data.txt") == b"data"
            mock_stream.assert_called_once_with("data.txt", FileMode.READ)
            assert mock_stream.return_value.__exit__.called

    def test_write_file_closes_stream_on_error(self):
        """测试写入失败时也关闭文件流"""
        with patch('easyio.core.file_util.FileStream') as mock_stream:
            stream = mock_stream.return_value.__enter__.return_value
            stream.write.side_effect = EasyIOError("disk full")
            mock_stream.return_value.__exit__.return_value = False

            with pytest.raises(EasyIOError):
                write_file("data.txt", "content")
            mock_stream.assert_called_once_with("data.txt", FileMode.WRITE)
            assert mock_stream.return_value.__exit__.called


class TestReadLines:
    """按行读取测试类"""

    @pytest.mark.parametrize("content,expected", [
        (b"", []),
        (b"x\ny\n", [b"x", b"y"]),
        (b"x\ny", [b"x", b"y"]),
        (b"\n\n", [b"", b""]),
        (b"a\r\nb", [b"a\r", b"b"]),
    ])
    def test_read_lines(self, tmp_path, content, expected):
        """测试按行读取"""
        path = tmp_path / "lines.txt"
        path.write_bytes(content)
        assert read_lines(path) == expected

    def test_read_lines_after_appends(self, tmp_path):
        """测试多次追加后的行顺序"""
        path = tmp_path / "log.txt"
        for i in range(3):
            append_file(path, f"entry {i}\n")
        assert read_lines(path) == [b"entry 0", b"entry 1", b"entry 2"]
