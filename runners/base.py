from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass
class CommandResult:
    """外部命令执行结果"""

    stdout: str
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(ABC):
    """
    外部命令执行器抽象基类
    屏蔽了底层是真实子进程还是测试替身的差异，Git Log Reporter 只依赖此接口。
    """

    @abstractmethod
    def run(self, command: str, args: Sequence[str]) -> CommandResult:
        """
        在当前工作目录下执行 command，阻塞直到其结束。
        实现不应因命令返回非零状态而抛出异常，而是如实返回 returncode。
        """
        pass
