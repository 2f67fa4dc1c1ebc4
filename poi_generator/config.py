from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = ''
    openai_model: str = 'gpt-3.5-turbo'
    openai_base_url: str = 'https://api.openai.com/v1'
    openai_max_tokens: int = 150
    openai_temperature: float = 0.7
    openai_timeout: float = 60.0

    # HTTP entry point
    server_host: str = '0.0.0.0'
    server_port: int = 8080

    class Config:
        env_file = ".env"
        env_prefix = "APP_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
