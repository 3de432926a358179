# -*- coding: utf-8 -*-
"""
图像处理模块
文件路径: src/image_io/img_process.py

提供逆置乱流程需要的图像读写功能，包括：
1. 从本地路径读取图像
2. 从内存字节流解码图像
3. 按 JPEG 质量参数保存图像
"""

import os

import cv2
import numpy as np

from src.config import Config

JPEG_EXTENSIONS = ('.jpg', '.jpeg')


class ImageProcessor:
    """
    图像处理类，负责逆置乱前后的解码与编码
    """
    
    def __init__(self, quality=Config.JPEG_QUALITY):
        """
        初始化图像处理类
        参数:
            quality: 保存 JPEG 时使用的质量 (0-100)
        """
        self.quality = quality
    
    def read_image(self, image_path):
        """
        读取图像
        参数:
            image_path: 图像路径
        返回:
            numpy.ndarray: 图像矩阵 (H, W, 3) BGR格式
        """
        if not os.path.exists(image_path):
            raise FileNotFoundError(f"图像文件不存在: {image_path}")
        
        img = cv2.imread(image_path, cv2.IMREAD_COLOR)
        if img is None:
            raise ValueError(f"无法读取图像: {image_path}")
        
        return img

    def decode_image(self, data):
        """
        从字节流解码图像
        参数:
            data: 编码后的图像字节 (JPEG/PNG/WebP 等)
        返回:
            numpy.ndarray: 图像矩阵 (H, W, 3) BGR格式
        """
        buf = np.frombuffer(data, dtype=np.uint8)
        img = cv2.imdecode(buf, cv2.IMREAD_COLOR) if buf.size else None
        if img is None:
            raise ValueError(f"无法解码图像数据 ({len(data)} bytes)")
        
        return img
    
    def save_image(self, image, output_path, quality=None):
        """
        保存图像
        参数:
            image: 图像矩阵 (H, W, 3) BGR格式
            output_path: 输出路径
            quality: JPEG 质量，默认使用实例配置
        返回:
            str: 输出路径
        """
        # 确保输出目录存在
        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir, exist_ok=True)

        params = []
        if output_path.lower().endswith(JPEG_EXTENSIONS):
            params = [cv2.IMWRITE_JPEG_QUALITY, self.quality if quality is None else quality]

        if not cv2.imwrite(output_path, image, params):
            raise IOError(f"无法保存图像: {output_path}")
        
        return output_path
