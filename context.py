"""
运行时选项的数据模型
"""
from dataclasses import dataclass, field
from typing import Optional
from config import GlobalConfig


@dataclass(frozen=True)
class StandupOptions:
    """
    封装一次运行的命令行选项。
    这是从 CLI 传递到 Orchestrator 的唯一对象，解析后不可修改。
    """

    # --- git log 过滤 ---
    since: Optional[str] = None
    author: Optional[str] = None
    verbose: bool = False

    # --- 站会数据来源 ---
    data_file: Optional[str] = None

    # --- 全局配置 ---
    global_config: GlobalConfig = field(default_factory=GlobalConfig, compare=False)
