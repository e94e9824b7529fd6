"""
pytest根配置
使项目根目录可被导入
"""
