# -*- coding: utf-8 -*-
import logging
import os
from concurrent.futures import ThreadPoolExecutor

from src.config import Config
from src.descrambler.scrambler import descramble
from src.image_io.fetcher import ImageFetcher
from src.image_io.img_process import ImageProcessor

logger = logging.getLogger(__name__)


class PageResult:
    """
    单张图像的处理结果
    stage 记录失败发生的阶段: download / descramble / save
    """
    def __init__(self, index, source, output_path=None, stage=None, error=None):
        self.index = index
        self.source = source
        self.output_path = output_path
        self.stage = stage
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def to_dict(self):
        return {
            'index': self.index + 1,
            'source': self.source,
            'output': self.output_path,
            'stage': self.stage,
            'error': str(self.error) if self.error is not None else None,
        }


class BatchDescrambler:
    """
    批量逆置乱: 每张图像独立执行 下载 -> 逆置乱 -> 保存，
    单张失败只记录在自己的结果里，不影响其他图像。
    """
    def __init__(self, seed, output_dir=Config.OUTPUT_DIR, fetcher=None, processor=None,
                 max_workers=Config.MAX_WORKERS, quality=Config.JPEG_QUALITY):
        self.seed = seed
        self.output_dir = output_dir
        self.processor = processor or ImageProcessor(quality=quality)
        self.fetcher = fetcher or ImageFetcher(processor=self.processor)
        self.max_workers = max_workers

    def output_path_for(self, index):
        return os.path.join(self.output_dir, Config.OUTPUT_NAME_PATTERN.format(index + 1))

    def process_page(self, index, location):
        """
        处理单张图像
        参数:
            index: 从 0 开始的序号
            location: 图像 URL 或本地路径
        返回:
            PageResult
        """
        tag = f"[{index + 1:3d}]"

        logger.info("%s downloading...", tag)
        try:
            scrambled = self.fetcher.fetch(location)
        except Exception as e:
            logger.error("%s failure to download - %s", tag, e)
            return PageResult(index, location, stage='download', error=e)

        logger.info("%s descrambling...", tag)
        try:
            restored = descramble(scrambled, self.seed)
        except Exception as e:
            logger.error("%s failure to descramble - %s", tag, e)
            return PageResult(index, location, stage='descramble', error=e)

        output_path = self.output_path_for(index)
        try:
            self.processor.save_image(restored, output_path)
        except Exception as e:
            logger.error("%s failure to save - %s", tag, e)
            return PageResult(index, location, stage='save', error=e)

        logger.info("%s saved image to %s", tag, output_path)
        return PageResult(index, location, output_path=output_path)

    def run(self, pages):
        """
        并发处理全部图像，等待全部完成后按输入顺序返回结果
        """
        pages = list(pages)
        logger.info("Scramble Seed: %d", self.seed)
        logger.info("Processing %d images", len(pages))

        if not pages:
            return []

        workers = max(1, min(self.max_workers, len(pages)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.process_page, i, page) for i, page in enumerate(pages)]
            results = [f.result() for f in futures]

        failed = sum(1 for r in results if not r.ok)
        logger.info("Completed: %d succeeded, %d failed", len(results) - failed, failed)
        return results
