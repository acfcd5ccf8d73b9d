"""
基础设施模块

包含数据库连接、电商目录源、文本嵌入与文本生成的适配器。
"""
