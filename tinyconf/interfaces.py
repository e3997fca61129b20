"""
模块接口契约 - 定义各模块的抽象接口

使用方式：
    from tinyconf.interfaces import IResolver

    class MyResolver(IResolver):
        name = "my source"
        prefix = "@"

        def resolve(self, name: str) -> str | None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from .diagnostics import Level


class IResolver(ABC):
    """占位符解析器接口 - 按名称提供替换值"""

    #: 诊断消息中使用的显示名称
    name: str = ""
    #: 占位符前缀标记（紧跟 "{" 构成起始定界符）
    prefix: str = ""

    @abstractmethod
    def resolve(self, name: str) -> str | None:
        """
        解析占位符名称

        Args:
            name: 花括号内的变量名

        Returns:
            对应的值；未知名称返回 None（不抛异常）
        """
        ...


class IDiagnosticSink(Protocol):
    """诊断出口接口"""

    def log(self, level: Level, message: str) -> None:
        ...
