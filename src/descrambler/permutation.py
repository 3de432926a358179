# -*- coding: utf-8 -*-
from src.descrambler.xorshift import XorShift32


def generate_permutation(seed, n):
    """
    根据种子生成 0..n-1 的置换
    
    做法: 为每个槽位生成一个 xorshift 随机键，按 (键, 原始下标) 升序排序，
    输出排序后的原始下标序列。output[i] 表示排序后第 i 位来自哪个原始槽位。
    
    参数:
        seed: 32 位无符号整数种子
        n: 单元格数量，必须 >= 0
    返回:
        list[int]: 长度为 n 的置换
    """
    if n < 0:
        raise ValueError(f"单元格数量不能为负数: {n}")

    prng = XorShift32(seed)
    items = [(prng.next(), index) for index in range(n)]
    # 键相同时按原始下标排序，保证跨实现结果一致
    items.sort()
    return [index for _, index in items]


def invert_permutation(perm):
    """
    求置换的逆: inv[perm[i]] = i
    """
    inverse = [0] * len(perm)
    for position, value in enumerate(perm):
        inverse[value] = position
    return inverse
