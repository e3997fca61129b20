"""
配置存储 - 有序、区分大小写的键值表

职责：
1. 精确查询 / 兄弟查询 / 子项查询
2. 单项写入与整体替换（替换对并发读者原子可见）

兄弟查询规则：
    key 以 prefix 开头，且 prefix 以 "@" 结尾或 key 在 prefix 之后不含 "."
    get_siblings("writer")  -> writer, writerConsole（不含 writer.level）
    get_siblings("level@")  -> level@com.example.pkg

测试要点：
- test_get_siblings: 兄弟查询排除子项
- test_get_siblings_at_sign: "@" 后允许出现 "."
- test_get_children: 子项查询去掉父前缀
- test_replace: 替换后无残留
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping

from ..models import ConfigurationSource, PropertyEntry


class Configuration:
    """配置存储（线程安全）"""

    def __init__(
        self,
        entries: Mapping[str, str] | None = None,
        source: ConfigurationSource | None = None,
    ):
        self._lock = threading.RLock()
        self._properties: dict[str, str] = dict(entries or {})
        self._source = source

    @property
    def source(self) -> ConfigurationSource | None:
        """文件来源（无配置文件时为 None）"""
        with self._lock:
            return self._source

    def get(self, key: str, default: str | None = None) -> str | None:
        """精确查询（区分大小写）"""
        with self._lock:
            return self._properties.get(key, default)

    def get_siblings(self, prefix: str) -> dict[str, str]:
        """获取同级键，不返回 "." 之后的子项"""
        opaque = prefix.endswith("@")
        return {
            key: value
            for key, value in self._snapshot()
            if key.startswith(prefix) and (opaque or key.find(".", len(prefix)) == -1)
        }

    def get_children(self, key: str) -> dict[str, str]:
        """获取子项（返回的键去掉 "<key>." 前缀，不含父项本身）"""
        prefix = key + "."
        return {
            name[len(prefix):]: value
            for name, value in self._snapshot()
            if name.startswith(prefix)
        }

    def set(self, key: str, value: str) -> None:
        """写入（已存在则覆盖）"""
        with self._lock:
            self._properties[key] = value

    def replace(
        self,
        entries: Mapping[str, str],
        source: ConfigurationSource | None = None,
    ) -> None:
        """清空并用新内容整体替换（来源随内容一并更新）"""
        with self._lock:
            self._properties.clear()
            self._properties.update(entries)
            self._source = source

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._properties)

    def to_dict(self) -> dict[str, str]:
        """有序快照"""
        with self._lock:
            return dict(self._properties)

    def entries(self) -> list[PropertyEntry]:
        return [PropertyEntry(key=key, value=value) for key, value in self._snapshot()]

    def _snapshot(self) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._properties.items())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._properties

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Configuration({len(self)} entries, source={self.source})"
