# -*- coding: utf-8 -*-
import os

class Config:
    """
    系统全局配置 - 针对 4x4 分块置乱方案
    """
    
    # --- 路径配置 ---
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    DATA_DIR = os.path.join(BASE_DIR, "data")
    OUTPUT_DIR = os.path.join(DATA_DIR, "descrambled")

    # --- 分块参数 (与上游编码器的块对齐方式绑定，不要随意修改) ---
    DIVISIONS = 4                     # 每个轴的分块数
    BLOCK_ALIGN = 8                   # 分块尺寸向下取整到 8 的倍数
    GRID_SIZE = DIVISIONS * DIVISIONS

    # --- 输出参数 ---
    JPEG_QUALITY = 95
    OUTPUT_NAME_PATTERN = "out_{:03d}.jpg"

    # --- 下载参数 ---
    DOWNLOAD_TIMEOUT = 30
    USER_AGENT = ("Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                  "AppleWebKit/537.36 (KHTML, like Gecko) "
                  "Chrome/124.0 Safari/537.36")

    # --- 批处理参数 ---
    MAX_WORKERS = 8

    # --- 日志参数 ---
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
