# -*- coding: utf-8 -*-
import logging
import sys

from src.config import Config


def setup_logger(name="src", level=Config.LOG_LEVEL, fmt=Config.LOG_FORMAT):
    """
    配置日志记录器 (重复调用不会叠加 handler)
    参数:
        name: logger 名称，默认覆盖整个 src 包
        level: 日志级别 ("DEBUG"/"INFO"/... 或 int)
    返回:
        logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger
