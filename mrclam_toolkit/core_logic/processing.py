"""
核心数据处理逻辑模块

这个模块包含MRCLAM数据集各类文件的加载函数：
条码表、路标真值，以及每个机器人的真值位姿、里程计和观测数据。
每个函数只负责一个文件，加载顺序和结果汇总由适配器负责。
"""

import logging
from typing import List, Sequence

from .config import ExtractorConfig
from .errors import CapacityExceededError, IntegrityError
from .parsing import iter_fields, iter_records, convert_record
from .structures import (
    BarcodeEntry,
    Landmark,
    Groundtruth,
    Odometry,
    Measurement,
    RobotRawDataset,
    BARCODE_FIELDS,
    LANDMARK_FIELDS,
    GROUNDTRUTH_FIELDS,
    ODOMETRY_FIELDS,
    MEASUREMENT_FIELDS
)

logger = logging.getLogger(__name__)

DEFAULT_MEASUREMENT_WINDOW_S = ExtractorConfig.measurement_window_s


def load_barcodes(path, max_barcodes: int) -> List[BarcodeEntry]:
    """
    加载条码文件 Barcodes.dat

    文件每行为 (subject, barcode)，条码取第一个制表符之后的字段；
    只有一列的行直接作为条码。重复的条码会被原样接受。

    Args:
        path: 条码文件路径
        max_barcodes (int): 条码表的最大行数

    Returns:
        List[BarcodeEntry]: 按文件顺序排列的条码表

    Raises:
        DatasetFileNotFoundError: 文件无法打开
        RecordParseError: 数据行格式错误
        CapacityExceededError: 行数超过 max_barcodes
    """
    barcodes: List[BarcodeEntry] = []

    for line_number, fields in iter_fields(path):
        if len(barcodes) >= max_barcodes:
            raise CapacityExceededError(
                f"Total barcodes in {path} exceeds the maximum of {max_barcodes} "
                f"(line {line_number})"
            )

        if len(fields) >= len(BARCODE_FIELDS):
            _, barcode_id = convert_record(fields, BARCODE_FIELDS, path, line_number)
        else:
            barcode_id, = convert_record(fields, BARCODE_FIELDS[1:], path, line_number)

        barcodes.append(BarcodeEntry(surface_index=len(barcodes), barcode_id=barcode_id))

    logger.debug(f"Loaded {len(barcodes)} barcodes from {path}")
    return barcodes


def resolve_barcode(barcodes: Sequence[BarcodeEntry], landmark_id: int) -> int:
    """
    查找路标编号对应的条码

    Args:
        barcodes (Sequence[BarcodeEntry]): 条码表
        landmark_id (int): 路标编号（从1开始）

    Returns:
        int: 非0的条码编号

    Raises:
        IntegrityError: 条码表中没有该位置或该位置的条码为0
    """
    index = landmark_id - 1
    if 0 <= index < len(barcodes):
        barcode = barcodes[index].barcode_id
    else:
        barcode = 0

    if barcode == 0:
        raise IntegrityError(
            f"No barcode for landmark {landmark_id}: barcodes not loaded or not correctly set"
        )
    return barcode


def load_landmarks(path, barcodes: Sequence[BarcodeEntry],
                   max_landmarks: int) -> List[Landmark]:
    """
    加载路标真值文件 Landmark_Groundtruth.dat

    必须在条码表加载之后调用，每个路标的条码从条码表的 id - 1 位置解析。

    Args:
        path: 路标文件路径
        barcodes (Sequence[BarcodeEntry]): 已加载的条码表
        max_landmarks (int): 路标表的最大行数

    Returns:
        List[Landmark]: 按文件顺序排列的路标

    Raises:
        DatasetFileNotFoundError: 文件无法打开
        RecordParseError: 数据行格式错误
        CapacityExceededError: 行数超过 max_landmarks
        IntegrityError: 路标引用的条码不存在或为0
    """
    landmarks: List[Landmark] = []

    for line_number, values in iter_records(path, LANDMARK_FIELDS):
        if len(landmarks) >= max_landmarks:
            raise CapacityExceededError(
                f"Total landmarks in {path} exceeds the maximum of {max_landmarks} "
                f"(line {line_number})"
            )

        landmark_id, x, y, x_std_dev, y_std_dev = values
        landmarks.append(Landmark(
            id=landmark_id,
            barcode=resolve_barcode(barcodes, landmark_id),
            x=x,
            y=y,
            x_std_dev=x_std_dev,
            y_std_dev=y_std_dev
        ))

    logger.debug(f"Loaded {len(landmarks)} landmarks from {path}")
    return landmarks


def load_groundtruth(path, dataset: RobotRawDataset) -> List[Groundtruth]:
    """
    加载机器人真值文件 Robotx_Groundtruth.dat

    先清空已有的真值序列，再按文件顺序逐行追加，不做合并。
    读取失败时序列保持为空。
    """
    dataset.ground_truth.clear()
    samples = [Groundtruth(*values) for _, values in iter_records(path, GROUNDTRUTH_FIELDS)]
    dataset.ground_truth.extend(samples)

    logger.debug(f"Robot {dataset.robot_id + 1}: loaded {len(dataset.ground_truth)} "
                 f"groundtruth samples")
    return dataset.ground_truth


def load_odometry(path, dataset: RobotRawDataset) -> List[Odometry]:
    """加载机器人里程计文件 Robotx_Odometry.dat，逐行追加"""
    dataset.odometry.clear()
    samples = [Odometry(*values) for _, values in iter_records(path, ODOMETRY_FIELDS)]
    dataset.odometry.extend(samples)

    logger.debug(f"Robot {dataset.robot_id + 1}: loaded {len(dataset.odometry)} "
                 f"odometry samples")
    return dataset.odometry


def aggregate_measurement(measurements: List[Measurement], time: float, subject: int,
                          range_: float, bearing: float,
                          window: float = DEFAULT_MEASUREMENT_WINDOW_S) -> bool:
    """
    把一次观测合并进已有的时间桶，或者创建新的时间桶

    按插入顺序查找第一个时间落在 [time - window, time + window] 内的记录。
    找到时把观测追加到该记录，记录的时间保持为创建时间桶的那次观测的时间；
    否则追加一条只包含该观测的新记录。

    Args:
        measurements (List[Measurement]): 已聚合的观测序列，原地修改
        time (float): 观测时间，单位为秒
        subject (int): 被观测对象的条码
        range_ (float): 距离，单位为米
        bearing (float): 方位角，单位为弧度
        window (float): 时间窗口半宽，单位为秒

    Returns:
        bool: 合并进已有记录返回True，创建新记录返回False
    """
    for index, record in enumerate(measurements):
        if time - window <= record.time <= time + window:
            measurements[index] = record.merged(subject, range_, bearing)
            return True

    measurements.append(Measurement(time, (subject,), (range_,), (bearing,)))
    return False


def load_measurements(path, dataset: RobotRawDataset,
                      window: float = DEFAULT_MEASUREMENT_WINDOW_S) -> List[Measurement]:
    """
    加载机器人观测文件 Robotx_Measurement.dat

    先清空已有的观测序列，再逐行按时间窗口聚合。
    """
    dataset.measurements.clear()
    measurements: List[Measurement] = []
    merged = 0

    for _, (time, subject, range_, bearing) in iter_records(path, MEASUREMENT_FIELDS):
        if aggregate_measurement(measurements, time, subject, range_, bearing, window):
            merged += 1

    dataset.measurements.extend(measurements)

    logger.debug(f"Robot {dataset.robot_id + 1}: aggregated "
                 f"{len(dataset.measurements) + merged} readings into "
                 f"{len(dataset.measurements)} measurements")
    return dataset.measurements
