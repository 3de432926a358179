# -*- coding: utf-8 -*-
"""
分块置乱器 / 逆置乱器
将图像划分为 DIVISIONS x DIVISIONS 的网格，按种子生成的置换重新排列分块。
"""

import logging

import numpy as np
from PIL import Image

from src.config import Config
from src.descrambler.permutation import generate_permutation, invert_permutation

logger = logging.getLogger(__name__)


class InvalidTileGeometryError(ValueError):
    """
    图像太小，无法按 8 像素粒度切成 4x4 网格
    """
    def __init__(self, tile_width, tile_height):
        self.tile_width = tile_width
        self.tile_height = tile_height
        super().__init__(f"图像或分块尺寸无效 (w:{tile_width}, h:{tile_height})")


class TileGeometry:
    """
    网格几何参数: 分块宽高与每轴分块数
    """
    def __init__(self, tile_width, tile_height, divisions=Config.DIVISIONS):
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.divisions = divisions

    @property
    def cell_count(self):
        return self.divisions * self.divisions

    @property
    def tiled_width(self):
        return self.tile_width * self.divisions

    @property
    def tiled_height(self):
        return self.tile_height * self.divisions

    def cell_origin(self, index):
        """
        获取单元格左上角的像素坐标 (x, y)
        """
        grid_x = index % self.divisions
        grid_y = index // self.divisions
        return grid_x * self.tile_width, grid_y * self.tile_height

    def cell_slice(self, index):
        """
        获取单元格对应的 numpy 切片 (行, 列)
        """
        x, y = self.cell_origin(index)
        return slice(y, y + self.tile_height), slice(x, x + self.tile_width)

    def cell_box(self, index):
        """
        获取单元格对应的 PIL 裁剪框 (left, upper, right, lower)
        """
        x, y = self.cell_origin(index)
        return x, y, x + self.tile_width, y + self.tile_height

    def __eq__(self, other):
        if not isinstance(other, TileGeometry):
            return NotImplemented
        return (self.tile_width, self.tile_height, self.divisions) == \
            (other.tile_width, other.tile_height, other.divisions)

    def __repr__(self):
        return (f"TileGeometry(tile_width={self.tile_width}, "
                f"tile_height={self.tile_height}, divisions={self.divisions})")


def compute_tile_geometry(width, height, divisions=Config.DIVISIONS, align=Config.BLOCK_ALIGN):
    """
    计算分块尺寸
    参数:
        width: 图像宽度 (像素)
        height: 图像高度 (像素)
        divisions: 每轴分块数
        align: 分块尺寸对齐粒度
    返回:
        TileGeometry
    """
    tile_width = (width // align // divisions) * align
    tile_height = (height // align // divisions) * align

    if tile_width == 0 or tile_height == 0:
        raise InvalidTileGeometryError(tile_width, tile_height)

    return TileGeometry(tile_width, tile_height, divisions)


class TileScrambler:
    """
    分块置乱器
    置换约定: shuffled_map[目标单元格] = 源单元格
    """
    def __init__(self, seed, divisions=Config.DIVISIONS, align=Config.BLOCK_ALIGN):
        """
        :param seed: 32 位无符号整数种子
        :param divisions: 每轴分块数
        :param align: 分块尺寸对齐粒度
        """
        self.seed = seed
        self.divisions = divisions
        self.align = align

    def _prepare(self, w, h):
        geometry = compute_tile_geometry(w, h, self.divisions, self.align)
        shuffled_map = generate_permutation(self.seed, geometry.cell_count)
        logger.debug("图像 %dx%d -> %r, 置换: %s", w, h, geometry, shuffled_map)
        return geometry, shuffled_map

    def unscramble(self, image_array):
        """
        还原分块位置
        :param image_array: numpy array, shape (H, W) 或 (H, W, C)
        :return: 新的 numpy array，网格外的边缘像素保持为 0
        """
        geometry, shuffled_map = self._prepare(image_array.shape[1], image_array.shape[0])

        restored = np.zeros_like(image_array)
        for dest_index, source_index in enumerate(shuffled_map):
            restored[geometry.cell_slice(dest_index)] = image_array[geometry.cell_slice(source_index)]

        return restored

    def scramble(self, image_array):
        """
        正向置乱 (上游生产者的做法)，unscramble 的逆操作
        :param image_array: numpy array, shape (H, W) 或 (H, W, C)
        :return: 新的 numpy array，网格外的边缘像素保持为 0
        """
        geometry, shuffled_map = self._prepare(image_array.shape[1], image_array.shape[0])

        inverse_map = invert_permutation(shuffled_map)

        scrambled = np.zeros_like(image_array)
        for source_index, dest_index in enumerate(inverse_map):
            scrambled[geometry.cell_slice(source_index)] = image_array[geometry.cell_slice(dest_index)]

        return scrambled

    def unscramble_image(self, image):
        """
        还原 PIL 图像的分块位置，保持原图的 mode (CMYK / YCbCr / P 等)
        :param image: PIL.Image.Image
        :return: 新的 PIL.Image.Image，网格外的边缘像素保持为 0
        """
        geometry, shuffled_map = self._prepare(*image.size)

        restored = Image.new(image.mode, image.size)
        if image.mode in ("P", "PA"):
            restored.putpalette(image.getpalette())
        restored.info.update(image.info)

        for dest_index, source_index in enumerate(shuffled_map):
            tile = image.crop(geometry.cell_box(source_index))
            restored.paste(tile, geometry.cell_box(dest_index)[:2])

        return restored


def descramble(image, seed):
    """
    对外唯一的逆置乱入口
    参数:
        image: numpy.ndarray (H, W[, C]) 或 PIL.Image.Image
        seed: 32 位无符号整数种子
    返回:
        与输入同类型的新图像，尺寸与输入相同
    异常:
        InvalidTileGeometryError: 图像太小
    """
    scrambler = TileScrambler(seed)

    if isinstance(image, Image.Image):
        return scrambler.unscramble_image(image)

    return scrambler.unscramble(np.asarray(image))
