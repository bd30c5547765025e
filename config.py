"""
全局配置
- 模板、文件名、git log 格式等常量
- 从 .env 加载可覆盖的设置 (STANDUP_DATA_FILE, STANDUP_LOG_LEVEL)
"""
import os
from dotenv import load_dotenv


# --- 脚本基础路径 ---
SCRIPT_BASE_PATH = os.path.abspath(os.path.dirname(__file__))
env_path = os.path.join(SCRIPT_BASE_PATH, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)
else:
    load_dotenv()


class GlobalConfig:
    """
    git-standup 的全局应用配置。
    """

    # --- 路径配置 ---
    SCRIPT_BASE_PATH: str = SCRIPT_BASE_PATH
    TEMPLATES_PACKAGE: str = "standup_templates"
    STANDUP_TEMPLATE_NAME: str = "standup.md.j2"

    # --- 文件名 ---
    STANDUP_FILENAME_PREFIX: str = "standup-"
    STANDUP_FILENAME_SUFFIX: str = ".md"

    # --- 站会内容 ---
    NO_DATA_PLACEHOLDER: str = "(No data)"

    # 未提供数据文件时使用的示例内容
    EXAMPLE_STANDUP_DATA: dict = {
        "yesterday": ["Finished refactoring signup page", "Rebased PR #345"],
        "today": ["Implement new feature toggles", "Plan microservice architecture for X"],
        "tomorrow": ["Begin refactoring billing module", "Review PR #346"],
        "blockers": ["Waiting on sysadmin for new test environment"],
        "accelerators": ["Details on devops pipeline optimization"],
    }

    # --- Git 命令格式 ---
    GIT_COMMAND: str = "git"
    GIT_LOG_FORMAT: str = "%Cred%h%Creset -%Creset %s"
    GIT_LOG_VERBOSE_FORMAT: str = "%Cgreen(%cD) %C(bold blue)<%an>"
    GIT_LOG_FORMAT_RESET: str = "%Creset"
    GIT_AUTHOR_CONFIG_KEY: str = "user.email"

    # --- 控制台输出 ---
    PROJECT_HEADER_FORMAT: str = ">> Project: {project_dir}"
    PROJECT_HEADER_RULE_CHAR: str = "="
    STANDUP_CREATED_MESSAGE: str = "Daily standup file created: {file_name}"
    DONE_MESSAGE: str = "Done! Git logs printed and standup successfully recorded."

    # =================================================================
    # --- 环境变量 (.env) ---
    # =================================================================
    STANDUP_DATA_FILE: str = os.getenv("STANDUP_DATA_FILE", "")
    LOG_LEVEL: str = os.getenv("STANDUP_LOG_LEVEL", "WARNING").upper()
