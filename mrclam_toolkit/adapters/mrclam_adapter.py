"""
MRCLAM数据集适配器模块

这个模块负责从UTIAS MRCLAM多机器人定位数据集目录中读取全部数据文件，
并转换为统一的数据结构。

主要功能：
1. 检查数据集目录是否存在
2. 按依赖顺序加载条码表、路标真值和每个机器人的时间序列
3. 汇总每一步的结果，任意一步失败则整体加载失败
4. 通过只读视图向调用方提供数据
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..core_logic.config import ExtractorConfig
from ..core_logic.errors import (
    ExtractionError,
    PathNotFoundError,
    UninitializedAccessError,
    DatasetLoadError
)
from ..core_logic.processing import (
    load_barcodes,
    load_landmarks,
    load_groundtruth,
    load_odometry,
    load_measurements
)
from ..core_logic.structures import (
    BarcodeEntry,
    Landmark,
    RobotRawDataset,
    RobotView,
    SequenceView
)


class DatasetExtractor:
    """
    MRCLAM数据集提取器

    状态只有两个：未配置和已加载。重新加载会清空并重新填充全部数据，
    加载失败后回到未配置状态，不提供任何部分数据。
    """

    def __init__(self, dataset: Optional[str] = None,
                 sample_period: Optional[float] = None,
                 config: Union[ExtractorConfig, Dict, None] = None):
        """
        初始化提取器

        Args:
            dataset (str): 数据集目录路径，给定时立即加载
            sample_period (float): 重采样周期，单位为秒（尚未实现），None表示使用配置中的值
            config (ExtractorConfig or Dict): 提取器配置，None表示使用默认值

        Raises:
            PathNotFoundError: 数据集目录不存在时抛出
            DatasetLoadError: 任意数据文件加载失败时抛出
            ValueError: 配置参数不正确时抛出
        """
        if isinstance(config, ExtractorConfig):
            self.config = config
        else:
            self.config = ExtractorConfig.from_dict(config)

        self.logger = self._setup_logger()

        self._dataset: Optional[str] = None
        self._sample_period = self.config.sample_period
        self._barcodes: List[BarcodeEntry] = []
        self._landmarks: List[Landmark] = []
        self._robots: List[RobotRawDataset] = [
            RobotRawDataset(robot_id) for robot_id in range(self.config.robot_count)
        ]

        if sample_period is not None:
            self.set_sample_period(sample_period)

        if dataset is not None:
            self.set_dataset(dataset)

    def _setup_logger(self) -> logging.Logger:
        """设置日志记录器"""
        logger = logging.getLogger('MRCLAMExtractor')
        logger.setLevel(logging.INFO)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    @property
    def is_loaded(self) -> bool:
        """数据集是否已成功加载"""
        return self._dataset is not None

    @property
    def dataset(self) -> Optional[str]:
        """最近一次成功加载的数据集目录"""
        return self._dataset

    @property
    def sample_period(self) -> float:
        return self._sample_period

    def set_dataset(self, dataset: str) -> Dict:
        """
        从指定目录加载全部数据

        加载顺序：条码表 -> 路标真值 -> 每个机器人的真值、里程计和观测。
        每一步的结果按逻辑与合并。

        Args:
            dataset (str): 数据集目录路径

        Returns:
            Dict: 加载结果统计信息

        Raises:
            PathNotFoundError: 数据集目录不存在
            DatasetLoadError: 任意一步加载失败
        """
        if not os.path.exists(dataset):
            raise PathNotFoundError(f"Dataset file path does not exist: {dataset}")

        self.logger.info(f"Extracting MRCLAM dataset from: {dataset}")
        self._reset()
        root = Path(dataset)
        failures: List[Tuple[str, ExtractionError]] = []

        barcodes_correct = self._run_step(
            'barcodes', failures,
            lambda: self._replace(self._barcodes, load_barcodes(
                root / self.config.barcodes_file, self.config.max_barcodes
            ))
        )

        # 路标依赖条码表，条码加载失败时路标会报告完整性错误
        landmarks_correct = self._run_step(
            'landmarks', failures,
            lambda: self._replace(self._landmarks, load_landmarks(
                root / self.config.landmarks_file, self._barcodes, self.config.max_landmarks
            ))
        )

        groundtruth_correct = True
        odometry_correct = True
        measurement_correct = True

        for robot in self._robots:
            groundtruth_correct &= self._run_step(
                f'robot{robot.robot_id + 1}.groundtruth', failures,
                lambda: load_groundtruth(self._robot_path(root, 'groundtruth', robot), robot)
            )
            odometry_correct &= self._run_step(
                f'robot{robot.robot_id + 1}.odometry', failures,
                lambda: load_odometry(self._robot_path(root, 'odometry', robot), robot)
            )
            measurement_correct &= self._run_step(
                f'robot{robot.robot_id + 1}.measurements', failures,
                lambda: load_measurements(
                    self._robot_path(root, 'measurements', robot), robot,
                    self.config.measurement_window_s
                )
            )

        successful_extraction = (barcodes_correct and landmarks_correct and
                                 groundtruth_correct and odometry_correct and
                                 measurement_correct)

        if not successful_extraction:
            self._reset()
            raise DatasetLoadError("Unable to extract data from dataset", failures)

        self._dataset = str(dataset)
        summary = self.summary()
        self.logger.info(
            f"Extraction completed: {summary['barcodes']} barcodes, "
            f"{summary['landmarks']} landmarks, {len(self._robots)} robots"
        )
        return summary

    def load(self) -> Dict:
        """重新加载当前数据集"""
        if self._dataset is None:
            raise UninitializedAccessError(
                "Dataset has not been specified. Call set_dataset() before reloading."
            )
        return self.set_dataset(self._dataset)

    def _run_step(self, name: str, failures: List[Tuple[str, ExtractionError]],
                  step: Callable) -> bool:
        """执行一个加载步骤，失败时记录错误并返回False"""
        try:
            step()
        except ExtractionError as e:
            self.logger.error(f"Failed to load {name}: {e}")
            failures.append((name, e))
            return False
        return True

    def _robot_path(self, root: Path, kind: str, robot: RobotRawDataset) -> Path:
        template = getattr(self.config, f'{kind}_file')
        return root / self.config.robot_file(template, robot.robot_id)

    @staticmethod
    def _replace(target: List, items: List):
        target[:] = items

    def _reset(self):
        """清空全部数据，回到未配置状态"""
        self._dataset = None
        self._barcodes.clear()
        self._landmarks.clear()
        for robot in self._robots:
            robot.clear()

    def _check_loaded(self):
        if not self.is_loaded:
            raise UninitializedAccessError(
                "Dataset has not been loaded. Please ensure set_dataset() succeeded "
                "before attempting to get data."
            )

    def get_barcodes(self) -> SequenceView:
        """
        获取条码表

        Returns:
            SequenceView: BarcodeEntry 的只读视图

        Raises:
            UninitializedAccessError: 数据集尚未成功加载
        """
        self._check_loaded()
        return SequenceView(self._barcodes)

    def get_landmarks(self) -> SequenceView:
        """获取路标真值的只读视图"""
        self._check_loaded()
        return SequenceView(self._landmarks)

    def get_robots(self) -> Tuple[RobotView, ...]:
        """获取全部机器人数据的只读视图，按从0开始的编号排列"""
        self._check_loaded()
        return tuple(robot.view() for robot in self._robots)

    def get_robot(self, robot_id: int) -> RobotView:
        """
        获取单个机器人数据的只读视图

        Args:
            robot_id (int): 从0开始的机器人编号

        Raises:
            UninitializedAccessError: 数据集尚未成功加载
            IndexError: 机器人编号超出范围
        """
        self._check_loaded()
        if not 0 <= robot_id < len(self._robots):
            raise IndexError(
                f"Robot id {robot_id} out of range (0-{len(self._robots) - 1})"
            )
        return self._robots[robot_id].view()

    def summary(self) -> Dict:
        """返回各数据表的数量统计"""
        self._check_loaded()
        return {
            'dataset': self._dataset,
            'barcodes': len(self._barcodes),
            'landmarks': len(self._landmarks),
            'robots': [
                {
                    'robot_id': robot.robot_id,
                    'ground_truth': len(robot.ground_truth),
                    'odometry': len(robot.odometry),
                    'measurements': len(robot.measurements)
                }
                for robot in self._robots
            ]
        }

    def set_sample_period(self, sample_period: float) -> bool:
        """
        设置重采样周期

        重采样尚未实现，这里只记录周期并返回False。

        Raises:
            ValueError: 周期不是正数时抛出
        """
        if sample_period <= 0:
            raise ValueError(f"Sample period must be positive, got {sample_period}")
        self._sample_period = float(sample_period)
        return False

    def sync_data(self, sample_period: Optional[float] = None) -> bool:
        """
        把时间序列重采样到统一的时间网格

        尚未实现，始终返回False，数据保持原样。
        """
        if sample_period is not None:
            self.set_sample_period(sample_period)
        self.logger.warning(
            f"Resampling to a {self._sample_period}s period is not implemented; "
            f"data left unsynchronized"
        )
        return False


def extract_dataset(dataset: str, sample_period: Optional[float] = None,
                    config: Union[ExtractorConfig, Dict, None] = None) -> DatasetExtractor:
    """
    MRCLAM适配器的主要入口函数

    Args:
        dataset (str): 数据集目录路径
        sample_period (float): 重采样周期，单位为秒
        config (ExtractorConfig or Dict): 提取器配置

    Returns:
        DatasetExtractor: 已加载的提取器

    Raises:
        PathNotFoundError: 数据集目录不存在
        DatasetLoadError: 加载失败
    """
    return DatasetExtractor(dataset, sample_period=sample_period, config=config)
