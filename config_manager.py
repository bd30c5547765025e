"""
配置管理器
- 负责加载调用方提供的站会数据 (JSON 文件)
- 决定数据来源：--data 参数 > .env 中的 STANDUP_DATA_FILE > 内置示例数据
"""

import os
import json
import logging
from typing import Any, Dict, Optional

from config import GlobalConfig

logger = logging.getLogger(__name__)


def load_standup_data(data_file: str) -> Dict[str, Any]:
    """
    加载站会数据文件。
    文件缺失或格式错误时记录错误并返回空字典 (所有栏目回退为 "(No data)")。
    """
    if not os.path.exists(data_file):
        logger.error(f"❌ 站会数据文件不存在: {data_file}")
        return {}
    try:
        with open(data_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ 加载站会数据文件 {data_file} 失败: {e}")
        return {}

    if not isinstance(data, dict):
        logger.error(f"❌ 站会数据文件 {data_file} 的顶层必须是 JSON 对象")
        return {}

    logger.info(f"✅ 成功加载站会数据: {data_file}")
    return data


def resolve_standup_data(
    data_file: Optional[str], global_config: GlobalConfig
) -> Dict[str, Any]:
    """按优先级选择站会数据来源"""
    path = data_file or global_config.STANDUP_DATA_FILE
    if path:
        return load_standup_data(path)
    logger.info("ℹ️ 未指定站会数据文件，使用内置示例数据")
    return dict(global_config.EXAMPLE_STANDUP_DATA)
