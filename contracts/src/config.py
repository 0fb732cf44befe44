from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    builder_config_path: str = "builder-config.yaml"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()
