"""
异常定义
所有I/O失败统一通过EasyIOError报告
"""

from typing import Optional


class EasyIOError(IOError):
    """I/O错误，携带操作和路径上下文"""

    def __init__(self, message: str, path: Optional[str] = None,
                 operation: Optional[str] = None):
        """
        初始化I/O错误

        Args:
            message: 错误描述
            path: 出错的文件路径
            operation: 出错的操作名称
        """
        super().__init__(f"IOError: {message}")
        self.message = message
        self.path = path
        self.operation = operation


class StreamMovedError(RuntimeError):
    """对已被移动的文件流执行操作"""
    pass


class FormatArgumentError(ValueError):
    """格式模板与参数不匹配"""
    pass
