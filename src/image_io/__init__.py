# image_io模块初始化文件

from .img_process import ImageProcessor
from .fetcher import ImageFetcher, ImageFetchError

__all__ = ['ImageProcessor', 'ImageFetcher', 'ImageFetchError']
