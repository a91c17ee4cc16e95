"""
工具包初始化文件
"""

__version__ = "1.0.0"
__author__ = "MRCLAM Data Toolkit Team"
__description__ = "UTIAS MRCLAM多机器人定位数据集提取工具包"

# 导入主要的数据结构
from .core_logic.structures import (
    BarcodeEntry,
    Landmark,
    Groundtruth,
    Odometry,
    Measurement,
    RobotView,
    SequenceView
)
from .core_logic.errors import (
    ExtractionError,
    PathNotFoundError,
    DatasetFileNotFoundError,
    RecordParseError,
    CapacityExceededError,
    IntegrityError,
    UninitializedAccessError,
    DatasetLoadError
)
from .core_logic.config import ExtractorConfig, load_config
from .adapters.mrclam_adapter import DatasetExtractor, extract_dataset

# 导出主要接口
__all__ = [
    'BarcodeEntry',
    'Landmark',
    'Groundtruth',
    'Odometry',
    'Measurement',
    'RobotView',
    'SequenceView',
    'ExtractionError',
    'PathNotFoundError',
    'DatasetFileNotFoundError',
    'RecordParseError',
    'CapacityExceededError',
    'IntegrityError',
    'UninitializedAccessError',
    'DatasetLoadError',
    'ExtractorConfig',
    'load_config',
    'DatasetExtractor',
    'extract_dataset'
]
