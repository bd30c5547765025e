# orchestrator.py
"""
业务逻辑编排器
流程：写站会文件 -> 当前仓库 git log -> 各子目录仓库 git log -> 完成提示
"""
import logging
from datetime import date
from typing import Optional

from context import StandupOptions
from runners.base import CommandRunner
from runners.subprocess_runner import SubprocessRunner
import config_manager
import git_utils
import standup_writer
import utils

logger = logging.getLogger(__name__)


class StandupOrchestrator:
    """
    负责执行一次 git standup 的完整流程。
    today 与 runner 由调用方注入，便于测试。
    """

    def __init__(
        self,
        options: StandupOptions,
        today: Optional[date] = None,
        runner: Optional[CommandRunner] = None,
    ):
        self.options = options
        self.global_config = options.global_config
        self.today = today or date.today()
        self.runner = runner or SubprocessRunner()

    def run(self):
        """
        执行核心业务流程。
        """
        # --- 1. 生成站会文件 ---
        file_name = self.write_standup()
        print(self.global_config.STANDUP_CREATED_MESSAGE.format(file_name=file_name))

        # --- 2. 当前目录本身是仓库：无条件输出 ---
        if git_utils.is_git_repository("."):
            self.report_current()

        # --- 3. 子目录仓库 ---
        for project_dir in git_utils.find_sub_repositories("."):
            self.report_project(project_dir)

        print(self.global_config.DONE_MESSAGE)

    def write_standup(self) -> str:
        date_str = self.today.strftime("%Y-%m-%d")
        standup_data = config_manager.resolve_standup_data(
            self.options.data_file, self.global_config
        )
        content = standup_writer.render_standup(
            date_str, standup_data, self.global_config
        )
        return standup_writer.save_standup_file(date_str, content, self.global_config)

    def report_current(self):
        """输出当前目录仓库的日志 (即使为空也输出)；失败不影响后续子目录"""
        try:
            project_log = git_utils.output_log(self.options, self.today, self.runner)
        except Exception as e:
            logger.error(f"❌ 获取当前目录仓库的日志失败: {e}", exc_info=True)
            return
        print(project_log)

    def report_project(self, project_dir: str):
        """输出单个子目录仓库的日志；日志为空时不输出任何内容"""
        try:
            with utils.working_directory(project_dir):
                project_log = git_utils.output_log(
                    self.options, self.today, self.runner
                ).strip()
        except Exception as e:
            logger.error(f"❌ 获取项目 {project_dir} 的日志失败: {e}", exc_info=True)
            return

        if not project_log:
            logger.info(f"ℹ️ 项目 {project_dir} 没有符合条件的提交，跳过")
            return

        header = self.global_config.PROJECT_HEADER_FORMAT.format(
            project_dir=project_dir
        )
        rule = self.global_config.PROJECT_HEADER_RULE_CHAR * len(header)
        print(rule)
        print(header)
        print(rule)
        print(project_log)
