"""
进程属性表 - 进程范围内的运行期属性

职责：
1. 提供与环境变量、配置存储相互独立的字符串属性命名空间
2. 支持从命令行 -Dkey=value 参数导入
3. 线程安全

测试要点：
- test_set_get: 设置/读取
- test_from_args: -D 参数解析
- test_invalid_arg: 非法参数报错
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping

from .exceptions import ConfigurationError


class SystemProperties:
    """进程属性表（线程安全）"""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._lock = threading.RLock()
        self._values: dict[str, str] = dict(initial or {})

    def get(self, name: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._values.get(name, default)

    def set(self, name: str, value: str) -> None:
        with self._lock:
            self._values[name] = value

    def remove(self, name: str) -> str | None:
        """删除属性，返回原值"""
        with self._lock:
            return self._values.pop(name, None)

    def update(self, values: Mapping[str, str]) -> None:
        with self._lock:
            self._values.update(values)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def names(self) -> list[str]:
        """属性名快照"""
        with self._lock:
            return list(self._values)

    def items(self) -> list[tuple[str, str]]:
        """属性快照"""
        with self._lock:
            return list(self._values.items())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._values

    def from_args(self, args: Iterable[str]) -> list[str]:
        """
        导入命令行中的 -Dkey=value 参数

        Args:
            args: 命令行参数

        Returns:
            未被识别为属性的剩余参数（保持原顺序）

        Raises:
            ConfigurationError: -D 参数缺少属性名
        """
        rest = []
        for arg in args:
            if not arg.startswith("-D"):
                rest.append(arg)
                continue
            name, _, value = arg[2:].partition("=")
            if not name:
                raise ConfigurationError(f"属性参数缺少名称: {arg}")
            self.set(name, value)
        return rest


# 进程默认属性表
system_properties = SystemProperties()
