"""
提取器配置模块

负责定义提取器的容量限制、机器人数量、观测聚合窗口和数据文件名模板，
并从YAML配置文件中加载这些参数。
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / 'config' / 'default_config.yaml'

# YAML中 file_names 段的键与配置字段的对应关系
_FILE_NAME_KEYS = {
    'barcodes': 'barcodes_file',
    'landmarks': 'landmarks_file',
    'groundtruth': 'groundtruth_file',
    'odometry': 'odometry_file',
    'measurements': 'measurements_file'
}


@dataclass(frozen=True)
class ExtractorConfig:
    """
    提取器配置

    Attributes:
        max_barcodes (int): 条码表的最大行数
        max_landmarks (int): 路标表的最大行数
        robot_count (int): 机器人数量
        measurement_window_s (float): 观测聚合时间窗口半宽，单位为秒
        sample_period (float): 重采样周期，单位为秒（尚未实现）
        barcodes_file (str): 条码文件名
        landmarks_file (str): 路标真值文件名
        groundtruth_file (str): 机器人真值文件名模板，{robot} 为从1开始的编号
        odometry_file (str): 里程计文件名模板
        measurements_file (str): 观测文件名模板
    """
    max_barcodes: int = 20
    max_landmarks: int = 15
    robot_count: int = 5
    measurement_window_s: float = 0.05
    sample_period: float = 0.02
    barcodes_file: str = 'Barcodes.dat'
    landmarks_file: str = 'Landmark_Groundtruth.dat'
    groundtruth_file: str = 'Robot{robot}_Groundtruth.dat'
    odometry_file: str = 'Robot{robot}_Odometry.dat'
    measurements_file: str = 'Robot{robot}_Measurement.dat'

    def __post_init__(self):
        for name in ('max_barcodes', 'max_landmarks', 'robot_count'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

        value = self.measurement_window_s
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"measurement_window_s must be a non-negative number, got {value!r}")

        value = self.sample_period
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValueError(f"sample_period must be a positive number, got {value!r}")

        for name in ('groundtruth_file', 'odometry_file', 'measurements_file'):
            template = getattr(self, name)
            if not isinstance(template, str) or '{robot}' not in template:
                raise ValueError(f"{name} must contain the '{{robot}}' placeholder")
            try:
                template.format(robot=1)
            except (KeyError, IndexError, ValueError) as e:
                raise ValueError(f"{name} is not a valid file name template: {template!r} ({e!r})")

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> 'ExtractorConfig':
        """
        从配置字典创建配置对象

        支持两种写法：平铺的字段名，或者 extractor_settings / file_names 分段。

        Args:
            data (Dict): 配置字典，None表示使用默认值

        Returns:
            ExtractorConfig: 配置对象

        Raises:
            ValueError: 包含未知配置项或取值不合法时抛出
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        known = {f.name for f in fields(cls)}
        values = {}

        for key, value in data.items():
            if key == 'extractor_settings':
                if not isinstance(value, dict):
                    raise ValueError("extractor_settings must be a dictionary")
                values.update(value)
            elif key == 'file_names':
                if not isinstance(value, dict):
                    raise ValueError("file_names must be a dictionary")
                for name, file_name in value.items():
                    if name not in _FILE_NAME_KEYS:
                        raise ValueError(f"Unknown file_names entry: {name}")
                    values[_FILE_NAME_KEYS[name]] = file_name
            else:
                values[key] = value

        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")

        return cls(**values)

    def robot_file(self, template: str, robot_id: int) -> str:
        """根据从0开始的机器人编号生成文件名"""
        return template.format(robot=robot_id + 1)


def load_config(config_path=None) -> ExtractorConfig:
    """
    加载YAML配置文件

    Args:
        config_path (str): 配置文件路径，None表示使用包内默认配置

    Returns:
        ExtractorConfig: 配置对象

    Raises:
        FileNotFoundError: 配置文件不存在
        ValueError: 配置文件格式错误
    """
    config_file = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML configuration file: {e}")

    if data is None:
        return ExtractorConfig()
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a YAML dictionary")

    return ExtractorConfig.from_dict(data)
