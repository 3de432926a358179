# batch模块初始化文件

from .job import DescrambleJob, parse_job, load_job
from .runner import BatchDescrambler, PageResult

__all__ = ['DescrambleJob', 'parse_job', 'load_job', 'BatchDescrambler', 'PageResult']
