"""
占位符引擎 - 用单个解析器替换字符串中的 <prefix>{name}

规则（单次从左到右扫描，不回溯）：
1. 查找下一个 "<prefix>{"，找不到则追加剩余部分并返回
2. 从起始花括号之后查找 "}"，缺失则告警并返回原始输入
3. 变量名为空则告警并返回原始输入
4. 解析器无对应值则告警并返回原始输入
5. 否则追加解析值，从 "}" 之后继续扫描

任一失败都会丢弃本次调用中已完成的替换（整串失败，不做部分替换）。

测试要点：
- test_resolve_single: 单个占位符
- test_missing_bracket: 缺少闭合括号
- test_empty_name: 空变量名
- test_unknown_name: 未知变量
- test_partial_discarded: 后续失败丢弃前面的替换
"""

from __future__ import annotations

from ..diagnostics import Level, internal_logger
from ..interfaces import IDiagnosticSink, IResolver


def resolve_placeholders(
    value: str,
    resolver: IResolver,
    sink: IDiagnosticSink | None = None,
) -> str:
    """
    替换 value 中属于 resolver 的全部占位符

    Args:
        value: 可能包含占位符的字符串
        resolver: 占位符解析器
        sink: 诊断出口（默认进程诊断日志）

    Returns:
        替换后的字符串；任一占位符无法解析时返回原始 value
    """
    sink = sink or internal_logger
    opening = resolver.prefix + "{"
    closing = "}"

    parts: list[str] = []
    position = 0
    index = value.find(opening)

    while index != -1:
        parts.append(value[position:index])

        start = index + len(opening)
        end = value.find(closing, start)
        if end == -1:
            sink.log(Level.WARN, f"Closing curly bracket is missing for '{value}'")
            return value

        name = value[start:end]
        if not name:
            sink.log(Level.WARN, f"Empty variable names cannot be resolved: {value}")
            return value

        data = resolver.resolve(name)
        if data is None:
            sink.log(Level.WARN, f"'{name}' could not be found in {resolver.name}")
            return value

        parts.append(data)
        position = end + 1
        index = value.find(opening, position)

    parts.append(value[position:])
    return "".join(parts)
