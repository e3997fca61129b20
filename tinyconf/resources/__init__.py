"""内置配置资源包（默认配置文件 tinylog.properties 放在此处）"""
