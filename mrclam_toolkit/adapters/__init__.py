"""
适配器模块初始化文件
"""

from .mrclam_adapter import extract_dataset, DatasetExtractor

__all__ = [
    'extract_dataset',
    'DatasetExtractor'
]
