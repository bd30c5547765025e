import logging
import subprocess
from typing import Sequence

from .base import CommandRunner, CommandResult

logger = logging.getLogger(__name__)

# 与 shell 中 "command not found" 的退出码一致
COMMAND_NOT_FOUND = 127


class SubprocessRunner(CommandRunner):
    """
    通过 subprocess 调用本地可执行文件。
    不经过 shell，参数原样传递；不设置超时。
    """

    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        argv = [command, *args]
        logger.debug(f"执行命令: {argv}")
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error(f"❌ 无法启动命令 {command}: {e}")
            return CommandResult(stdout="", returncode=COMMAND_NOT_FOUND, stderr=str(e))

        logger.debug(
            f"命令结束 (returncode={result.returncode})，输出 {len(result.stdout.splitlines())} 行"
        )
        return CommandResult(
            stdout=result.stdout, returncode=result.returncode, stderr=result.stderr
        )
