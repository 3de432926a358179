# -*- coding: utf-8 -*-
from src.utils.data_handler import load_data

MAX_SEED = 0xFFFFFFFF


class DescrambleJob:
    """
    一次批处理任务: 一个种子 + 一组图像地址
    """
    def __init__(self, seed, pages):
        self.seed = seed
        self.pages = list(pages)

    def __repr__(self):
        return f"DescrambleJob(seed={self.seed}, pages={len(self.pages)})"


def parse_job(data):
    """
    解析任务字典
    格式: {"scramble_seed": 12345, "page_list": ["https://...", ...]}
    """
    if not isinstance(data, dict):
        raise ValueError("任务文件格式错误: 顶层必须是 JSON 对象")

    if 'scramble_seed' not in data:
        raise ValueError("任务文件缺少字段: scramble_seed")
    seed = data['scramble_seed']
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= MAX_SEED:
        raise ValueError(f"scramble_seed 必须是 32 位无符号整数: {seed!r}")

    pages = data.get('page_list')
    if not isinstance(pages, list) or not all(isinstance(p, str) for p in pages):
        raise ValueError("page_list 必须是字符串列表")

    return DescrambleJob(seed, pages)


def load_job(path):
    """从 JSON 文件读取任务"""
    return parse_job(load_data(path))
