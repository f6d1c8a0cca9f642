"""
文件流类
独占一个二进制文件句柄，提供整体读取、按行读取、类型化读取和格式化写入
"""

import io
import logging
import os
from typing import Any, BinaryIO, Optional, Union

from ..domain.errors import EasyIOError, StreamMovedError
from ..domain.file_mode import FileMode
from ..util.format_util import format_message
from ..util.typed_io import (
    DEFAULT_ENCODING,
    WHITESPACE,
    is_readable,
    parse_token,
    render_value,
)

logger = logging.getLogger(__name__)

LINE_TERMINATOR = b"\n"


class FileStream:
    """
    文件流类

    一个句柄同一时刻只属于一个FileStream，不能复制，只能通过move()转移。
    离开with块、显式close()或对象被回收时都会关闭句柄，且只关闭一次。
    """

    def __init__(self, path: Union[str, os.PathLike], mode: Union[FileMode, str] = FileMode.READ):
        """
        打开文件

        Args:
            path: 文件路径
            mode: 打开模式，默认只读

        Raises:
            EasyIOError: 操作系统无法打开该文件
        """
        self._handle: Optional[BinaryIO] = None
        self._moved = False
        self._path = os.fspath(path)
        self._mode = FileMode.get(mode)
        self._handle = self._open_handle(self._path, self._mode)
        logger.info(f"Opened file {self._path} in {self._mode} mode")

    @classmethod
    def open(cls, path: Union[str, os.PathLike], mode: Union[FileMode, str] = FileMode.READ) -> 'FileStream':
        """打开文件，等同于直接构造"""
        return cls(path, mode)

    @staticmethod
    def _open_handle(path: str, mode: FileMode) -> BinaryIO:
        try:
            return open(path, mode.open_mode)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to open file {path}: {e}")
            raise EasyIOError(f"Failed to open file: {path}", path=path, operation="open") from e

    @property
    def path(self) -> str:
        return self._path

    @property
    def mode(self) -> FileMode:
        return self._mode

    def is_open(self) -> bool:
        """当前是否持有一个有效句柄"""
        return self._handle is not None and not self._handle.closed

    # ---------------------------------------------------------------- 所有权

    def move(self) -> 'FileStream':
        """
        转移句柄所有权

        Returns:
            持有原句柄的新文件流，原对象此后不能再做任何I/O
        """
        self._ensure_not_moved("move")
        target = type(self).__new__(type(self))
        target._path = self._path
        target._mode = self._mode
        target._handle = self._handle
        target._moved = False
        self._handle = None
        self._moved = True
        logger.debug(f"Moved stream for {self._path}")
        return target

    def assign(self, other: 'FileStream') -> 'FileStream':
        """
        移动赋值：关闭当前句柄，接管other的句柄

        Args:
            other: 被接管的文件流，之后处于已移动状态

        Returns:
            self
        """
        if other is self:
            return self
        other._ensure_not_moved("assign")
        self.close()
        self._path = other._path
        self._mode = other._mode
        self._handle = other._handle
        self._moved = False
        other._handle = None
        other._moved = True
        return self

    def __copy__(self):
        raise TypeError("FileStream cannot be copied, use move() to transfer ownership")

    def __deepcopy__(self, memo):
        raise TypeError("FileStream cannot be copied, use move() to transfer ownership")

    def __reduce_ex__(self, protocol):
        raise TypeError("FileStream cannot be pickled")

    def _ensure_not_moved(self, operation: str):
        if self._moved:
            raise StreamMovedError(f"Cannot {operation}: stream for {self._path} has been moved")

    # ---------------------------------------------------------------- 读取

    def _can_read(self) -> bool:
        return self.is_open() and self._mode.readable

    def _require_readable(self, operation: str) -> BinaryIO:
        self._ensure_not_moved(operation)
        if not self._can_read():
            logger.error(f"{operation} failed, file not open for reading: {self._path}")
            raise EasyIOError(f"File not open for reading: {self._path}",
                              path=self._path, operation=operation)
        return self._handle

    def read_all(self) -> bytes:
        """
        读取全部内容

        Returns:
            文件的全部字节，空文件或不可定位的流返回b""，读取后位置停在内容末尾
        """
        handle = self._require_readable("read_all")
        if not handle.seekable():
            logger.debug(f"{self._path} is not seekable, read_all returns nothing")
            return b""
        try:
            handle.seek(0, os.SEEK_END)
            size = handle.tell()
            handle.seek(0)
            if size <= 0:
                return b""
            content = handle.read(size)
        except io.UnsupportedOperation:
            return b""
        except OSError as e:
            logger.error(f"Failed to read {self._path}: {e}")
            raise EasyIOError(f"Failed to read file: {self._path}",
                              path=self._path, operation="read_all") from e

        logger.debug(f"Read {len(content)} bytes from {self._path}")
        return content

    def read_line(self) -> Optional[bytes]:
        """
        读取一行

        Returns:
            去掉换行符的一行；流未打开、已到末尾或读取失败时返回None
        """
        self._ensure_not_moved("read_line")
        if not self._can_read():
            return None

        try:
            line = self._handle.readline()
        except OSError as e:
            logger.debug(f"read_line on {self._path} gave no line: {e}")
            return None

        if not line:
            return None
        if line.endswith(LINE_TERMINATOR):
            line = line[:-len(LINE_TERMINATOR)]
        return line

    def read(self, type_: Any) -> Optional[Any]:
        """
        读取一个以空白分隔的令牌并解析为指定类型

        Args:
            type_: 目标类型，必须满足可读约定

        Returns:
            解析后的值；流末尾或解析失败时返回None，解析失败时读取位置会被恢复
        """
        self._ensure_not_moved("read")
        if not is_readable(type_):
            raise TypeError(f"Type {getattr(type_, '__name__', type_)!r} is not readable")
        if not self._can_read():
            return None

        handle = self._handle
        try:
            # 不可定位的流(如管道)解析失败时无法回退
            start = handle.tell() if handle.seekable() else None
            token = self._next_token(handle)
        except OSError as e:
            logger.debug(f"read on {self._path} gave no token: {e}")
            return None

        if token is None:
            return None

        try:
            return parse_token(token.decode(DEFAULT_ENCODING), type_)
        except ValueError as e:
            logger.debug(f"Token {token!r} in {self._path} is not a {type_.__name__}: {e}")
            if start is not None:
                handle.seek(start)
            return None

    @staticmethod
    def _next_token(handle: BinaryIO) -> Optional[bytes]:
        # 用peek查看下一个字节，分隔符留给下一次读取
        char = handle.peek(1)[:1]
        while char and char in WHITESPACE:
            handle.read(1)
            char = handle.peek(1)[:1]
        if not char:
            return None

        token = bytearray()
        while char and char not in WHITESPACE:
            token += handle.read(1)
            char = handle.peek(1)[:1]
        return bytes(token)

    def __iter__(self):
        """按行迭代"""
        return self

    def __next__(self) -> bytes:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line

    # ---------------------------------------------------------------- 写入

    def _require_writable(self, operation: str) -> BinaryIO:
        self._ensure_not_moved(operation)
        if not self.is_open() or not self._mode.writable:
            logger.error(f"{operation} failed, file not open for writing: {self._path}")
            raise EasyIOError(f"File not open for writing: {self._path}",
                              path=self._path, operation=operation)
        return self._handle

    def _write_bytes(self, data: bytes, operation: str):
        handle = self._require_writable(operation)
        try:
            handle.write(data)
        except OSError as e:
            logger.error(f"Failed to write to {self._path}: {e}")
            raise EasyIOError(f"Failed to write file: {self._path}",
                              path=self._path, operation=operation) from e
        logger.debug(f"Wrote {len(data)} bytes to {self._path}")

    def write(self, value: Any):
        """
        写入一个值

        Args:
            value: 满足可写约定的值，字节原样写入，其余按文本渲染
        """
        self._write_bytes(render_value(value), "write")

    def write_fmt(self, fmt: str, *args: Any, **kwargs: Any):
        """
        格式化写入

        Args:
            fmt: 格式模板
            *args: 位置参数
            **kwargs: 命名参数
        """
        text = format_message(fmt, *args, **kwargs)
        self._write_bytes(text.encode(DEFAULT_ENCODING), "write_fmt")

    def write_line(self, value: Any):
        """写入一个值并换行"""
        self._write_bytes(render_value(value) + LINE_TERMINATOR, "write_line")

    def write_line_fmt(self, fmt: str, *args: Any, **kwargs: Any):
        """格式化写入并换行"""
        text = format_message(fmt, *args, **kwargs)
        self._write_bytes(text.encode(DEFAULT_ENCODING) + LINE_TERMINATOR, "write_line_fmt")

    def flush(self):
        """刷新缓冲区"""
        self._ensure_not_moved("flush")
        if self.is_open() and self._mode.writable:
            self._handle.flush()

    # ---------------------------------------------------------------- 定位

    def _require_open(self, operation: str) -> BinaryIO:
        self._ensure_not_moved(operation)
        if not self.is_open():
            logger.error(f"{operation} failed, file not open: {self._path}")
            raise EasyIOError(f"File not open: {self._path}", path=self._path, operation=operation)
        return self._handle

    def seek(self, pos: int):
        """
        设置读写位置

        Args:
            pos: 从文件开头算起的绝对字节偏移，可以超过文件末尾
        """
        handle = self._require_open("seek")
        try:
            handle.seek(pos)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to seek to {pos} in {self._path}: {e}")
            raise EasyIOError(f"Failed to seek to {pos}: {self._path}",
                              path=self._path, operation="seek") from e

    def tell(self) -> int:
        """获取当前读写位置"""
        handle = self._require_open("tell")
        try:
            return handle.tell()
        except OSError as e:
            logger.error(f"Failed to tell position in {self._path}: {e}")
            raise EasyIOError(f"Failed to get position: {self._path}",
                              path=self._path, operation="tell") from e

    # ---------------------------------------------------------------- 关闭

    def close(self):
        """关闭流，可重复调用，不会抛出异常"""
        handle, self._handle = self._handle, None
        if handle is None or handle.closed:
            return
        try:
            handle.close()
        except OSError as e:
            logger.warning(f"Failed to close {self._path}: {e}")
        else:
            logger.info(f"Closed file {self._path}")

    def __enter__(self):
        self._ensure_not_moved("enter")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __del__(self):
        # 解释器退出时模块全局变量可能已被清理，这里不记录日志
        handle = getattr(self, "_handle", None)
        if handle is None or handle.closed:
            return
        self._handle = None
        try:
            handle.close()
        except OSError:
            pass

    def __repr__(self):
        if self._moved:
            state = "moved"
        elif self.is_open():
            state = "open"
        else:
            state = "closed"
        return f"FileStream(path={self._path!r}, mode={self._mode}, state={state})"
