# descrambler模块初始化文件

from .xorshift import XorShift32
from .permutation import generate_permutation, invert_permutation
from .scrambler import TileScrambler, TileGeometry, InvalidTileGeometryError, compute_tile_geometry, descramble

__all__ = ['XorShift32', 'generate_permutation', 'invert_permutation', 'TileScrambler', 'TileGeometry',
           'InvalidTileGeometryError', 'compute_tile_geometry', 'descramble']
