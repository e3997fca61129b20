"""
占位符引擎单元测试

每个模块完成后必须运行：pytest tests/unit/test_placeholder.py -v
"""

import logging

import pytest

from tinyconf.diagnostics import Level
from tinyconf.properties import SystemProperties
from tinyconf.resolvers import (
    EnvironmentVariableResolver,
    SystemPropertyResolver,
    resolve_placeholders,
)


@pytest.fixture
def env_resolver(environ) -> EnvironmentVariableResolver:
    return EnvironmentVariableResolver(environ)


class TestResolvers:
    """解析器测试"""

    def test_environment_resolver(self, env_resolver):
        """测试环境变量解析"""
        assert env_resolver.resolve("HOME") == "/x"
        assert env_resolver.resolve("UNKNOWN") is None
        assert env_resolver.prefix == "$"

    def test_environment_resolver_defaults_to_os_environ(self, monkeypatch):
        """测试默认读取 os.environ"""
        monkeypatch.setenv("TINYCONF_TEST_VAR", "value")
        assert EnvironmentVariableResolver().resolve("TINYCONF_TEST_VAR") == "value"

    def test_system_property_resolver(self):
        """测试进程属性解析"""
        resolver = SystemPropertyResolver(SystemProperties({"user": "alice"}))
        assert resolver.resolve("user") == "alice"
        assert resolver.resolve("UNKNOWN") is None
        assert resolver.prefix == "#"

    def test_prefixes_distinct(self):
        """测试两种解析器前缀不同"""
        assert EnvironmentVariableResolver.prefix != SystemPropertyResolver.prefix


class TestResolvePlaceholders:
    """占位符替换测试"""

    def test_resolve_single(self, env_resolver, sink):
        """测试单个占位符"""
        assert resolve_placeholders("${HOME}", env_resolver, sink) == "/x"
        assert sink.records == []

    def test_resolve_embedded(self, env_resolver, sink):
        """测试占位符嵌在文本中"""
        assert resolve_placeholders("dir=${HOME}/logs", env_resolver, sink) == "dir=/x/logs"

    def test_resolve_back_to_back(self, env_resolver, sink):
        """测试相邻占位符"""
        assert resolve_placeholders("${HOME}${APP}", env_resolver, sink) == "/xdemo"

    def test_no_placeholder(self, env_resolver, sink):
        """测试无占位符时原样返回"""
        assert resolve_placeholders("{message}", env_resolver, sink) == "{message}"

    def test_other_prefix_untouched(self, env_resolver, sink):
        """测试其他解析器的占位符保持不变"""
        assert resolve_placeholders("#{HOME} ${HOME}", env_resolver, sink) == "#{HOME} /x"

    def test_missing_bracket(self, env_resolver, sink):
        """测试缺少闭合括号"""
        assert resolve_placeholders("${HOME", env_resolver, sink) == "${HOME"
        assert sink.messages(Level.WARN) == ["Closing curly bracket is missing for '${HOME'"]

    def test_empty_name(self, env_resolver, sink):
        """测试空变量名"""
        assert resolve_placeholders("${}", env_resolver, sink) == "${}"
        assert sink.messages(Level.WARN) == ["Empty variable names cannot be resolved: ${}"]

    def test_unknown_name(self, env_resolver, sink):
        """测试未知变量"""
        assert resolve_placeholders("a ${NOPE} b", env_resolver, sink) == "a ${NOPE} b"
        assert sink.messages(Level.WARN) == ["'NOPE' could not be found in environment variables"]

    def test_partial_discarded(self, env_resolver, sink):
        """测试后续失败丢弃前面的替换"""
        value = "${HOME}/${NOPE}"
        assert resolve_placeholders(value, env_resolver, sink) == value
        assert len(sink.records) == 1

    def test_value_is_not_rescanned(self, sink):
        """测试替换结果不会被同一解析器再次扫描"""
        resolver = EnvironmentVariableResolver({"A": "${B}", "B": "never"})
        assert resolve_placeholders("${A}", resolver, sink) == "${B}"

    def test_default_sink_uses_logging(self, env_resolver, caplog):
        """测试默认诊断出口写入 logging"""
        with caplog.at_level(logging.WARNING, logger="tinyconf"):
            resolve_placeholders("${}", env_resolver)
        assert "Empty variable names cannot be resolved" in caplog.text
