"""全局常量"""

# 版本信息
VERSION = "1.0.0"
APP_NAME = "News Event Bus"

# 事件通道默认配置
DEFAULT_MAX_WORKERS = 8  # 投递线程池上限
DEFAULT_THREAD_NAME_PREFIX = "news-bus"
DEFAULT_PENDING_WARNING_THRESHOLD = 1000  # 在途投递数超过该值时告警

# 环境变量前缀
ENV_PREFIX = "NEWS_BUS_"

# 文件路径
CONFIG_DIR_NAME = ".news_bus"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "news_bus.log"
