"""
核心逻辑模块初始化文件
"""

from .structures import (
    BarcodeEntry,
    Landmark,
    Groundtruth,
    Odometry,
    Measurement,
    RobotRawDataset,
    RobotView,
    SequenceView
)
from .errors import (
    ExtractionError,
    PathNotFoundError,
    DatasetFileNotFoundError,
    RecordParseError,
    CapacityExceededError,
    IntegrityError,
    UninitializedAccessError,
    DatasetLoadError
)
from .config import ExtractorConfig, load_config

# processing模块的导入将在需要时进行
__all__ = [
    'BarcodeEntry',
    'Landmark',
    'Groundtruth',
    'Odometry',
    'Measurement',
    'RobotRawDataset',
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
    'load_config'
]
