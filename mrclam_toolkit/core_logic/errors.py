"""
数据提取错误类型定义模块

这个模块定义了数据集提取过程中所有可能出现的错误类型。
每种错误同时继承自对应的Python内置异常，调用方既可以按具体类型捕获，
也可以按 FileNotFoundError / ValueError / RuntimeError 等通用类型捕获。
"""

from typing import List, Optional, Tuple


class ExtractionError(Exception):
    """所有数据提取错误的基类"""


class PathNotFoundError(ExtractionError, FileNotFoundError):
    """数据集根目录不存在"""


class DatasetFileNotFoundError(ExtractionError, FileNotFoundError):
    """数据集中某个必需的数据文件无法打开"""


class RecordParseError(ExtractionError, ValueError):
    """
    数据行解析失败

    字段缺失（制表符数量不足）或字段不是合法数字时抛出。

    Attributes:
        path (str): 出错的文件路径，直接解析单行时为None
        line_number (int): 出错的行号（从1开始），直接解析单行时为None
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        if path is not None:
            message = f"{path}:{line_number}: {message}"
        super().__init__(message)


class CapacityExceededError(ExtractionError, ValueError):
    """条码或路标的行数超过配置的最大容量"""


class IntegrityError(ExtractionError, ValueError):
    """路标引用的条码未加载或为0"""


class UninitializedAccessError(ExtractionError, RuntimeError):
    """在数据集成功加载之前访问数据"""


class DatasetLoadError(ExtractionError, RuntimeError):
    """
    数据集整体加载失败

    所有步骤的结果按逻辑与合并，任意一步失败都会转换为这一个错误。

    Attributes:
        failures (List[Tuple[str, ExtractionError]]): 失败步骤名称及其对应的错误
    """

    def __init__(self, message: str,
                 failures: Optional[List[Tuple[str, ExtractionError]]] = None):
        self.failures = list(failures or [])
        if self.failures:
            details = "; ".join(f"{step}: {error}" for step, error in self.failures)
            message = f"{message} ({details})"
        super().__init__(message)
