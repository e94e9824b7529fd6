"""
配置数据模型
"""
