# -*- coding: utf-8 -*-
"""
主应用程序入口文件
文件路径: main.py

读取任务 JSON，批量下载并逆置乱图像。
用法: python main.py <json_file_path> [--out DIR] [--workers N]
"""

import argparse
import sys

from src.config import Config
from src.batch.job import load_job
from src.batch.runner import BatchDescrambler
from src.utils import save_data, setup_logger


def build_parser():
    parser = argparse.ArgumentParser(description="分块置乱图像批量还原工具")

    parser.add_argument("job", help="任务 JSON 文件 (scramble_seed + page_list)")
    parser.add_argument("--out", "-o", default=Config.OUTPUT_DIR, help="输出目录")
    parser.add_argument("--workers", "-w", type=int, default=Config.MAX_WORKERS, help="并发线程数")
    parser.add_argument("--quality", "-q", type=int, default=Config.JPEG_QUALITY, help="JPEG 质量")
    parser.add_argument("--seed", "-s", type=int, default=None, help="覆盖任务文件中的种子")
    parser.add_argument("--report", "-r", default=None, help="将每张图像的处理结果写入 JSON")
    parser.add_argument("--log-level", type=str.upper, default=Config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="日志级别")
    return parser


def main(argv=None):
    """
    程序主入口函数
    返回:
        int: 0 全部成功, 1 有图像失败, 2 任务文件无效
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and not 0 <= args.seed <= 0xFFFFFFFF:
        parser.error(f"--seed 必须是 32 位无符号整数: {args.seed}")

    logger = setup_logger(level=args.log_level)
    logger.info("Start Descrambler")

    try:
        job = load_job(args.job)
    except (OSError, ValueError) as e:
        logger.error("failure to read job file (%s)", e)
        return 2

    seed = job.seed if args.seed is None else args.seed

    runner = BatchDescrambler(
        seed,
        output_dir=args.out,
        max_workers=args.workers,
        quality=args.quality,
    )
    results = runner.run(job.pages)

    if args.report:
        save_data([r.to_dict() for r in results], args.report)
        logger.info("report written to %s", args.report)

    logger.info("Completed to Download and Descramble Images")
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
