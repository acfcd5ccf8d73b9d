"""
业务库模块

库组织:
- exceptions: 异常定义
- constants: 系统常量
- factory: 服务组装工厂
"""
