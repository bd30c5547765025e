from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from config import GlobalConfig

STANDUP_SECTIONS = ("yesterday", "today", "tomorrow", "blockers", "accelerators")


def _no_data() -> List[str]:
    return [GlobalConfig.NO_DATA_PLACEHOLDER]


@dataclass
class StandupData:
    """站会内容数据模型，每个栏目是一个有序的字符串列表"""

    yesterday: List[str] = field(default_factory=_no_data)
    today: List[str] = field(default_factory=_no_data)
    tomorrow: List[str] = field(default_factory=_no_data)
    blockers: List[str] = field(default_factory=_no_data)
    accelerators: List[str] = field(default_factory=_no_data)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "StandupData":
        """
        从字典构造。缺失 (或为 None) 的栏目保持默认值 ["(No data)"]；
        单个字符串视为只有一项的列表。
        """
        sections = {}
        for name in STANDUP_SECTIONS:
            value = (data or {}).get(name)
            if value is None:
                continue
            if isinstance(value, str):
                sections[name] = [value]
            elif isinstance(value, (list, tuple)):
                sections[name] = [str(item) for item in value]
            else:
                raise ValueError(
                    f"栏目 '{name}' 必须是字符串列表，实际为 {type(value).__name__}"
                )
        return cls(**sections)
