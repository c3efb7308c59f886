"""
基础设施层

- messaging: 事件通道
- adapters: 存储适配器（持久化监听器）
- config: 配置与依赖注入容器
"""
