"""
工具模块初始化文件
"""

from .conversions import (
    groundtruth_to_array,
    odometry_to_array,
    measurements_to_array,
    landmarks_to_array,
    barcode_lookup,
    normalize_angle
)

__all__ = [
    'groundtruth_to_array',
    'odometry_to_array',
    'measurements_to_array',
    'landmarks_to_array',
    'barcode_lookup',
    'normalize_angle'
]
