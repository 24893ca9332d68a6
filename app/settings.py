from pydantic import HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App configuration"""

    model_config = SettingsConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        env_file='.env', env_file_encoding='utf-8', extra='ignore'
    )

    llm_api_key: str
    openai_base_url: HttpUrl = HttpUrl('https://generativelanguage.googleapis.com/v1beta/openai/')
    model_name: str = 'gemini-2.5-flash-lite'
    temperature: float = 0.7
    llm_timeout: float = 120.0

    reachability_timeout: float = 5.0
    max_resources_per_node: int = 3
    user_agent: str = 'learning-map-api/1.0 (+link check)'

    cors_origins: list[str] = ['*']
    log_level: str = 'INFO'


settings = Settings()  # pyright: ignore[reportCallIssue]
