"""
Utilities package - Common utilities for the pixel bus system
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter, get_class_logger

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'get_class_logger',
]
