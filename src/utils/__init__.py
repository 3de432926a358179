# utils模块初始化文件 (日志 + JSON 读写)

from .logger import setup_logger
from .data_handler import load_data, save_data

__all__ = ['setup_logger', 'load_data', 'save_data']
