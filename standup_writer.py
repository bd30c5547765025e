"""
站会文件生成器 - Jinja2 模板引擎
负责把 StandupData 渲染为固定格式的 Markdown，并写入 standup-YYYYMMDD.md。
"""
import logging
import os
from typing import Any, Iterable, Mapping, Optional, Union

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from config import GlobalConfig
from models import StandupData

logger = logging.getLogger(__name__)


def format_bullets(items: Iterable[str]) -> str:
    """每项一行 Markdown 列表，保持原有顺序"""
    return "\n".join(f"- {item}" for item in items)


def _get_environment(global_config: GlobalConfig) -> Environment:
    """模板随 standup_templates 包一起安装，源码目录与 site-packages 下路径一致"""
    env = Environment(
        loader=PackageLoader(global_config.TEMPLATES_PACKAGE, "."),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["bullets"] = format_bullets
    return env


def render_standup(
    date_str: str,
    standup_data: Optional[Union[StandupData, Mapping[str, Any]]] = None,
    global_config: Optional[GlobalConfig] = None,
) -> str:
    """
    使用 Jinja2 模板渲染站会 Markdown。
    纯函数：不读取时钟，也不关心数据从哪里来。
    """
    global_config = global_config or GlobalConfig()
    if not isinstance(standup_data, StandupData):
        standup_data = StandupData.from_mapping(standup_data)

    template = _get_environment(global_config).get_template(
        global_config.STANDUP_TEMPLATE_NAME
    )
    logger.debug(f"🎨 正在渲染 Jinja2 模板: {global_config.STANDUP_TEMPLATE_NAME}")
    return template.render(date_str=date_str, standup=standup_data)


def standup_filename(
    date_str: str, global_config: Optional[GlobalConfig] = None
) -> str:
    """standup- + 去掉连字符的日期 + .md，例如 2024-03-05 -> standup-20240305.md"""
    global_config = global_config or GlobalConfig()
    return (
        f"{global_config.STANDUP_FILENAME_PREFIX}"
        f"{date_str.replace('-', '')}"
        f"{global_config.STANDUP_FILENAME_SUFFIX}"
    )


def save_standup_file(
    date_str: str,
    content: str,
    global_config: Optional[GlobalConfig] = None,
    directory: str = ".",
) -> str:
    """
    写入站会文件 (同一天重复运行会覆盖)，返回文件名。
    写入失败 (OSError) 直接向上抛出，由入口终止运行。
    """
    file_name = standup_filename(date_str, global_config)
    full_path = os.path.join(directory, file_name)
    with open(full_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"✅ 站会文件已保存: {os.path.abspath(full_path)}")
    return file_name
