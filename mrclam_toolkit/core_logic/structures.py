"""
统一数据结构定义模块

这个模块定义了从MRCLAM多机器人定位数据集中提取出的数据结构。
所有样本类型都是不可变的数据类，提取器独占底层存储，
通过 SequenceView 向调用方提供只读视图。
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class BarcodeEntry:
    """
    条码表中的一项

    Attributes:
        surface_index (int): 在条码文件中的顺序位置（从0开始）
        barcode_id (int): 条码编号
    """
    surface_index: int
    barcode_id: int


@dataclass(frozen=True)
class Landmark:
    """
    路标真值

    Attributes:
        id (int): 路标编号（从1开始，对应条码表的 id - 1 位置）
        barcode (int): 从条码表解析出的条码编号，必须非0
        x (float): 世界坐标系下的x坐标，单位为米
        y (float): 世界坐标系下的y坐标，单位为米
        x_std_dev (float): x坐标的标准差
        y_std_dev (float): y坐标的标准差
    """
    id: int
    barcode: int
    x: float
    y: float
    x_std_dev: float
    y_std_dev: float


@dataclass(frozen=True)
class Groundtruth:
    """机器人真值位姿 (time[s], x[m], y[m], orientation[rad])"""
    time: float
    x: float
    y: float
    orientation: float


@dataclass(frozen=True)
class Odometry:
    """里程计指令 (time[s], forward_velocity[m/s], angular_velocity[rad/s])"""
    time: float
    forward_velocity: float
    angular_velocity: float


@dataclass(frozen=True)
class Measurement:
    """
    聚合后的距离-方位观测

    subjects、ranges、bearings 是平行序列，第i项共同描述一次合并进
    该时间桶的观测。time 始终是创建该时间桶的第一条观测的时间。

    Attributes:
        time (float): 时间桶的时间戳，单位为秒
        subjects (Tuple[int, ...]): 被观测对象的条码编号
        ranges (Tuple[float, ...]): 距离，单位为米
        bearings (Tuple[float, ...]): 方位角，单位为弧度
    """
    time: float
    subjects: Tuple[int, ...] = ()
    ranges: Tuple[float, ...] = ()
    bearings: Tuple[float, ...] = ()

    def merged(self, subject: int, range_: float, bearing: float) -> 'Measurement':
        """返回追加了一次观测的新记录，时间戳保持不变"""
        return Measurement(
            time=self.time,
            subjects=self.subjects + (subject,),
            ranges=self.ranges + (range_,),
            bearings=self.bearings + (bearing,)
        )


class SequenceView(Sequence):
    """
    列表的只读实时视图

    视图不复制数据，底层列表在重新加载时的变化会直接反映出来，
    但调用方无法通过视图修改数据。
    """

    __slots__ = ('_items',)

    def __init__(self, items: List[T]):
        self._items = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, SequenceView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"SequenceView({self._items!r})"


@dataclass
class RobotRawDataset:
    """
    单个机器人的原始时间序列数据

    Attributes:
        robot_id (int): 机器人编号（从0开始，文件名中使用 robot_id + 1）
        ground_truth (List[Groundtruth]): 真值位姿序列
        odometry (List[Odometry]): 里程计序列
        measurements (List[Measurement]): 聚合后的观测序列
    """
    robot_id: int
    ground_truth: List[Groundtruth] = field(default_factory=list)
    odometry: List[Odometry] = field(default_factory=list)
    measurements: List[Measurement] = field(default_factory=list)

    def clear(self):
        """清空全部序列"""
        self.ground_truth.clear()
        self.odometry.clear()
        self.measurements.clear()

    def view(self) -> 'RobotView':
        """返回该数据集的只读视图"""
        return RobotView(self)


class RobotView:
    """RobotRawDataset 的只读视图"""

    __slots__ = ('_dataset',)

    def __init__(self, dataset: RobotRawDataset):
        self._dataset = dataset

    @property
    def robot_id(self) -> int:
        return self._dataset.robot_id

    @property
    def ground_truth(self) -> SequenceView:
        return SequenceView(self._dataset.ground_truth)

    @property
    def odometry(self) -> SequenceView:
        return SequenceView(self._dataset.odometry)

    @property
    def measurements(self) -> SequenceView:
        return SequenceView(self._dataset.measurements)

    def __repr__(self) -> str:
        return (
            f"RobotView(robot_id={self.robot_id}, "
            f"ground_truth={len(self._dataset.ground_truth)}, "
            f"odometry={len(self._dataset.odometry)}, "
            f"measurements={len(self._dataset.measurements)})"
        )


# MRCLAM数据文件的列定义（按文件中的顺序）
BARCODE_FIELDS = [
    ('subject', int),
    ('barcode_id', int)
]

LANDMARK_FIELDS = [
    ('id', int),
    ('x', float),
    ('y', float),
    ('x_std_dev', float),
    ('y_std_dev', float)
]

GROUNDTRUTH_FIELDS = [
    ('time', float),
    ('x', float),
    ('y', float),
    ('orientation', float)
]

ODOMETRY_FIELDS = [
    ('time', float),
    ('forward_velocity', float),
    ('angular_velocity', float)
]

MEASUREMENT_FIELDS = [
    ('time', float),
    ('subject', int),
    ('range', float),
    ('bearing', float)
]
