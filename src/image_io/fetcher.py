# -*- coding: utf-8 -*-
"""
图像获取器
支持 http(s) 地址、file:// 地址和本地路径
"""

import logging
import os
import urllib.error
import urllib.parse
import urllib.request

from src.config import Config
from src.image_io.img_process import ImageProcessor

logger = logging.getLogger(__name__)


class ImageFetchError(IOError):
    """图像下载或读取失败"""


class ImageFetcher:
    def __init__(self, timeout=Config.DOWNLOAD_TIMEOUT, user_agent=Config.USER_AGENT, processor=None):
        self.timeout = timeout
        self.user_agent = user_agent
        self.processor = processor or ImageProcessor()

    def fetch_bytes(self, location):
        """
        获取原始图像字节
        参数:
            location: URL 或本地路径
        返回:
            bytes
        """
        parsed = urllib.parse.urlparse(location)

        if parsed.scheme in ('http', 'https'):
            return self._download(location)

        path = urllib.request.url2pathname(parsed.path) if parsed.scheme == 'file' else location
        if not os.path.isfile(path):
            raise ImageFetchError(f"图像文件不存在: {path}")
        with open(path, 'rb') as f:
            return f.read()

    def _download(self, url):
        req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                if resp.status != 200:
                    raise ImageFetchError(f"HTTP 状态码无效 ({resp.status} {resp.reason}): {url}")
                data = resp.read()
        except urllib.error.HTTPError as e:
            raise ImageFetchError(f"HTTP 状态码无效 ({e.code} {e.reason}): {url}") from e
        except urllib.error.URLError as e:
            raise ImageFetchError(f"图像下载失败 ({url}): {e.reason}") from e

        logger.debug("下载完成 %s (%d bytes)", url, len(data))
        return data

    def fetch(self, location):
        """
        获取并解码图像
        返回:
            numpy.ndarray: 图像矩阵 (H, W, 3) BGR格式
        """
        return self.processor.decode_image(self.fetch_bytes(location))
