import glob
import logging
import os
from datetime import date, timedelta
from typing import List, Optional, Sequence

from config import GlobalConfig
from context import StandupOptions
from runners.base import CommandRunner
from runners.subprocess_runner import SubprocessRunner

logger = logging.getLogger(__name__)

MONDAY = 0


def run_git_command(
    runner: CommandRunner,
    args: Sequence[str],
    context: str = "执行Git命令",
    global_config: Optional[GlobalConfig] = None,
) -> str:
    """
    统一的Git命令执行函数
    - 在当前工作目录下执行
    - 失败不中断流程：记录 git 的 stderr，仍返回其 stdout (可能为空)
    """
    global_config = global_config or GlobalConfig()
    logger.info(f"在 {os.getcwd()} 中执行命令: git {' '.join(args)}")
    result = runner.run(global_config.GIT_COMMAND, args)
    if not result.ok:
        logger.warning(
            f"⚠️ {context}失败 (returncode={result.returncode}): {result.stderr.strip()}"
        )
    else:
        logger.info(f"{context}成功，输出 {len(result.stdout.splitlines())} 行")
    return result.stdout


def default_since(today: date) -> date:
    """
    上一个工作日：周一回溯 3 天 (跳过周末)，其余日子回溯 1 天。
    不考虑节假日。
    """
    if today.weekday() == MONDAY:
        return today - timedelta(days=3)
    return today - timedelta(days=1)


def resolve_since(options: StandupOptions, today: date) -> str:
    """--since 原样透传，不做校验；未提供时使用 default_since"""
    if options.since is not None:
        return options.since
    return default_since(today).isoformat()


def resolve_author(options: StandupOptions, runner: CommandRunner) -> str:
    """--author 优先，否则读取当前仓库的 git config user.email"""
    if options.author is not None:
        return options.author
    email = run_git_command(
        runner,
        ["config", options.global_config.GIT_AUTHOR_CONFIG_KEY],
        "读取 user.email",
        options.global_config,
    )
    return email.strip()


def build_log_format(verbose: bool, global_config: Optional[GlobalConfig] = None) -> str:
    global_config = global_config or GlobalConfig()
    log_format = global_config.GIT_LOG_FORMAT
    if verbose:
        log_format += global_config.GIT_LOG_VERBOSE_FORMAT
    return log_format + global_config.GIT_LOG_FORMAT_RESET


def build_log_command(
    options: StandupOptions, today: date, runner: CommandRunner
) -> List[str]:
    """构造 git log 的参数列表 (不含 git 本身)"""
    log_format = build_log_format(options.verbose, options.global_config)
    since = resolve_since(options, today)
    author = resolve_author(options, runner)
    return [
        "log",
        f"--pretty=format:{log_format}",
        f"--since={since}",
        f"--author={author}",
    ]


def output_log(
    options: StandupOptions,
    today: Optional[date] = None,
    runner: Optional[CommandRunner] = None,
) -> str:
    """
    获取当前目录仓库的提交历史，返回 git 的原始输出 (含颜色转义序列)。
    """
    today = today or date.today()
    runner = runner or SubprocessRunner()
    args = build_log_command(options, today, runner)
    return run_git_command(runner, args, "获取Git提交历史", options.global_config)


def is_git_repository(path: str = ".") -> bool:
    """检查指定目录下是否存在 .git 目录"""
    return os.path.isdir(os.path.join(path, ".git"))


def find_sub_repositories(root: str = ".") -> List[str]:
    """
    扫描 root 的直接子目录 (只扫一层)，返回含有 .git 条目的子目录名，按名称排序。
    """
    matches = glob.glob(os.path.join(glob.escape(root), "*", ".git"))
    projects = [os.path.relpath(os.path.dirname(match), root) for match in matches]
    return sorted(projects)
