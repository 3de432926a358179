# -*- coding: utf-8 -*-
"""
Xorshift32 伪随机数生成器
仅用于生成可复现的排序键，不具备任何密码学强度
"""

MASK_32 = 0xFFFFFFFF


class XorShift32:
    """
    32 位 xorshift 生成器 (13, 17, 5)
    状态只属于当前实例，不要在多次置乱计算之间复用。
    """
    def __init__(self, seed):
        """
        :param seed: 32 位无符号整数种子，0 会被替换为 1
        """
        seed &= MASK_32
        if seed == 0:
            # 全零状态下 xorshift 永远输出 0
            seed = 1
        self.state = seed

    def next(self):
        x = self.state
        x ^= (x << 13) & MASK_32
        x ^= x >> 17
        x ^= (x << 5) & MASK_32
        self.state = x
        return x
