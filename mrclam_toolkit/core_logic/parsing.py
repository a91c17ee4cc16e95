"""
制表符分隔数据行解析模块

MRCLAM数据集的所有文件都是制表符分隔的文本：
以 '#' 开头的行是注释，其余空白字符在解析前全部去除，
然后按调用方给定的固定列顺序把字段转换为整数或浮点数。
"""

from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .errors import DatasetFileNotFoundError, RecordParseError

Schema = Sequence[Tuple[str, Callable]]

DELIMITER = '\t'
COMMENT_PREFIX = '#'


def split_fields(line: str) -> Optional[List[str]]:
    """
    去除注释和空白后按制表符切分一行

    Returns:
        Optional[List[str]]: 字段列表，注释行和空行返回None
    """
    if line.startswith(COMMENT_PREFIX):
        return None

    stripped = ''.join(ch for ch in line if ch == DELIMITER or not ch.isspace())
    if not stripped:
        return None

    return stripped.split(DELIMITER)


def _convert(text: str, name: str, field_type: Callable):
    """把单个字段转换为声明的数值类型"""
    if field_type is int:
        try:
            return int(text)
        except ValueError:
            pass
        # 整数列也接受 "3.0" 这样的整数值实数
        try:
            value = float(text)
        except ValueError:
            raise RecordParseError(f"Field '{name}' is not an integer: {text!r}")
        if not value.is_integer():
            raise RecordParseError(f"Field '{name}' is not an integer: {text!r}")
        return int(value)

    try:
        return field_type(text)
    except (TypeError, ValueError):
        raise RecordParseError(f"Field '{name}' is not numeric: {text!r}")


def convert_fields(fields: Sequence[str], schema: Schema) -> tuple:
    """
    按列定义转换已切分的字段，多余的字段被忽略

    Raises:
        RecordParseError: 字段缺失或不是合法数字时抛出
    """
    if len(fields) < len(schema):
        missing = schema[len(fields)][0]
        raise RecordParseError(
            f"Expected {len(schema)} fields but found {len(fields)} "
            f"(missing '{missing}')"
        )

    return tuple(
        _convert(text, name, field_type)
        for text, (name, field_type) in zip(fields, schema)
    )


def parse_record(line: str, schema: Schema) -> Optional[tuple]:
    """
    解析一行数据

    Args:
        line (str): 原始文本行
        schema (Schema): 列定义，每一项为 (字段名, int 或 float)

    Returns:
        Optional[tuple]: 按列顺序转换后的值，注释行和空行返回None

    Raises:
        RecordParseError: 字段缺失或不是合法数字时抛出
    """
    fields = split_fields(line)
    if fields is None:
        return None
    return convert_fields(fields, schema)


def iter_fields(path) -> Iterator[Tuple[int, List[str]]]:
    """
    逐行读取数据文件并切分字段

    Yields:
        Tuple[int, List[str]]: (行号, 字段列表)，跳过注释行和空行

    Raises:
        DatasetFileNotFoundError: 文件无法打开时抛出
        RecordParseError: 数据行不是合法的UTF-8文本时抛出
    """
    file_path = Path(path)
    try:
        f = open(file_path, 'rb')
    except OSError as e:
        raise DatasetFileNotFoundError(f"Unable to open data file {file_path}: {e}")

    with f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode('utf-8')
            except UnicodeDecodeError as e:
                raise RecordParseError(str(e), str(file_path), line_number) from e
            fields = split_fields(line)
            if fields is not None:
                yield line_number, fields


def iter_records(path, schema: Schema) -> Iterator[Tuple[int, tuple]]:
    """
    逐行解析数据文件

    Args:
        path: 数据文件路径
        schema (Schema): 列定义

    Yields:
        Tuple[int, tuple]: (行号, 解析后的值)

    Raises:
        DatasetFileNotFoundError: 文件无法打开时抛出
        RecordParseError: 任意一行解析失败时抛出，附带文件名和行号
    """
    for line_number, fields in iter_fields(path):
        yield line_number, convert_record(fields, schema, path, line_number)


def convert_record(fields: Sequence[str], schema: Schema, path, line_number: int) -> tuple:
    """convert_fields 的包装，错误信息中附带文件名和行号"""
    try:
        return convert_fields(fields, schema)
    except RecordParseError as e:
        raise RecordParseError(str(e), str(path), line_number) from e
