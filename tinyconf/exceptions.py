"""异常定义"""


class ConfigurationError(Exception):
    """配置层基础异常（仅用于调用方的使用错误，加载与解析过程从不抛出）"""
