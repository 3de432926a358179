# -*- coding: utf-8 -*-
import json
import os


def load_data(path):
    """读取 JSON 文件"""
    if not os.path.exists(path):
        raise FileNotFoundError(f"文件不存在: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_data(data, path):
    """写入 JSON 文件"""
    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path
