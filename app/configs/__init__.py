from app.configs.logger import file_logger
from app.configs.settings import CONFIG_MAP, LimiterConfig, settings

__all__ = [
    "CONFIG_MAP",
    "LimiterConfig",
    "file_logger",
    "settings",
]
