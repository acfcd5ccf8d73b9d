"""
核心业务模块

- catalog: 向量存储、目录同步流程、相似度检索
- recommendation: 行业推荐策略引擎
"""
