"""
命令行界面 (Interface) 层
负责 argparse 定义，并把解析结果组装为 StandupOptions 交给 Orchestrator。
"""
import argparse
import logging
from datetime import date
from typing import List, Optional

from config import GlobalConfig
from context import StandupOptions
from orchestrator import StandupOrchestrator
from runners.base import CommandRunner

logger = logging.getLogger(__name__)

USAGE = "git standup [--since=<date>] [--author=<name>]"


class StandupHelpFormatter(argparse.RawTextHelpFormatter):
    """用法行统一使用 "Usage: " 前缀 (argparse 默认是小写 "usage: ")"""

    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def setup_parser() -> argparse.ArgumentParser:
    """
    负责所有 argparse 的定义。
    未知参数由 argparse 打印用法到 stderr 并以状态 2 退出。
    """
    parser = argparse.ArgumentParser(
        prog="git standup",
        usage=USAGE,
        description="生成每日站会 Markdown 文件，并列出当前目录及子目录仓库的近期提交。",
        formatter_class=StandupHelpFormatter,
    )

    parser.add_argument(
        "--since",
        nargs="?",
        const=None,
        default=None,
        help="只显示该日期之后的提交 (原样传给 git log)。\n"
        "(默认: 上一个工作日，周一回溯到上周五)",
    )
    parser.add_argument(
        "--author",
        nargs="?",
        const=None,
        default=None,
        help="只显示该作者的提交。\n(默认: 当前仓库 git config user.email)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="显示更多提交信息，如提交时间和作者",
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="站会内容 JSON 文件 (键: yesterday/today/tomorrow/blockers/accelerators)。\n"
        "(默认: .env 中的 STANDUP_DATA_FILE，未设置时使用示例数据)",
    )

    return parser


def parse_options(
    argv: Optional[List[str]] = None, global_config: Optional[GlobalConfig] = None
) -> StandupOptions:
    args = setup_parser().parse_args(argv)
    return StandupOptions(
        since=args.since,
        author=args.author,
        verbose=args.verbose,
        data_file=args.data,
        global_config=global_config or GlobalConfig(),
    )


def run_cli(
    argv: Optional[List[str]] = None,
    today: Optional[date] = None,
    runner: Optional[CommandRunner] = None,
):
    """
    主入口点。
    """
    options = parse_options(argv)

    logger.info("=" * 50)
    logger.info("🚀 git-standup 启动...")
    logger.info(f"   [since]: {options.since or '(上一个工作日)'}")
    logger.info(f"   [author]: {options.author or '(git config user.email)'}")
    logger.info(f"   [verbose]: {options.verbose}")
    logger.info("=" * 50)

    orchestrator = StandupOrchestrator(options, today=today, runner=runner)
    orchestrator.run()
    logger.info("✅ 运行完毕。")
