# 读取 .env 配置
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # 为空时只输出到控制台

    # Phrase matcher
    PHRASE_CASE_INSENSITIVE: bool = False
    PHRASE_FILE: str = ""  # 启动时预加载的短语列表（UTF-8，每行一个）
    MAX_TEXT_LENGTH: int = 1_000_000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore" # 忽略多余的环境变量
    )

settings = Settings()
