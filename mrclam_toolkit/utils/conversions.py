"""
数组转换工具模块

把提取器输出的数据结构转换为Numpy数组，供滤波和估计算法直接使用。
所有函数只读取输入，不修改提取器持有的数据。
"""

from typing import Dict, Iterable

import numpy as np

from ..core_logic.structures import (
    BarcodeEntry,
    Landmark,
    Groundtruth,
    Odometry,
    Measurement
)


def groundtruth_to_array(samples: Iterable[Groundtruth]) -> np.ndarray:
    """
    将真值位姿序列转换为数组

    Args:
        samples (Iterable[Groundtruth]): 真值位姿序列

    Returns:
        np.ndarray: 形状为(N, 4)的数组，每行为 [time, x, y, orientation]
    """
    rows = [(s.time, s.x, s.y, s.orientation) for s in samples]
    return np.array(rows, dtype=np.float64).reshape(-1, 4)


def odometry_to_array(samples: Iterable[Odometry]) -> np.ndarray:
    """
    将里程计序列转换为数组

    Returns:
        np.ndarray: 形状为(N, 3)的数组，每行为 [time, forward_velocity, angular_velocity]
    """
    rows = [(s.time, s.forward_velocity, s.angular_velocity) for s in samples]
    return np.array(rows, dtype=np.float64).reshape(-1, 3)


def measurements_to_array(records: Iterable[Measurement]) -> np.ndarray:
    """
    将聚合后的观测展开为数组

    同一条记录中的每次观测展开为一行，时间统一使用记录的时间。

    Returns:
        np.ndarray: 形状为(M, 4)的数组，每行为 [time, subject, range, bearing]
    """
    rows = [
        (record.time, subject, range_, bearing)
        for record in records
        for subject, range_, bearing in zip(record.subjects, record.ranges, record.bearings)
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, 4)


def landmarks_to_array(landmarks: Iterable[Landmark]) -> np.ndarray:
    """
    将路标真值转换为数组

    Returns:
        np.ndarray: 形状为(N, 6)的数组，每行为 [id, barcode, x, y, x_std_dev, y_std_dev]
    """
    rows = [
        (lm.id, lm.barcode, lm.x, lm.y, lm.x_std_dev, lm.y_std_dev)
        for lm in landmarks
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, 6)


def barcode_lookup(barcodes: Iterable[BarcodeEntry]) -> Dict[int, int]:
    """
    建立条码到对象编号的映射

    对象编号从1开始，与路标编号一致（编号 = 条码表位置 + 1）。
    重复的条码以第一次出现的位置为准。
    """
    lookup: Dict[int, int] = {}
    for entry in barcodes:
        lookup.setdefault(entry.barcode_id, entry.surface_index + 1)
    return lookup


def normalize_angle(angle):
    """
    将角度归一化到 [-pi, pi) 范围

    Args:
        angle (float or np.ndarray): 角度，单位为弧度

    Returns:
        与输入类型一致的归一化角度
    """
    wrapped = np.mod(np.asarray(angle, dtype=np.float64) + np.pi, 2 * np.pi) - np.pi
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped
