import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator


def resolve_log_level(level: str) -> int:
    """日志级别名 -> 数值；无法识别的名称 (包括 logging 中非级别的属性) 回退为 WARNING"""
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int) or isinstance(value, bool):
        return logging.WARNING
    return value


def setup_logging(level: str = "WARNING"):
    """
    配置全局日志
    stdout 留给站会确认信息和 git log 输出，日志写到 stderr。
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@contextmanager
def working_directory(path: str) -> Iterator[str]:
    """临时切换工作目录，无论代码块是否抛出异常都会切回原目录"""
    logger = logging.getLogger(__name__)
    original = os.getcwd()
    os.chdir(path)
    logger.debug(f"📂 进入目录: {os.getcwd()}")
    try:
        yield os.getcwd()
    finally:
        os.chdir(original)
        logger.debug(f"📂 返回目录: {original}")
