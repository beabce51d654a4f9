from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8080
    max_body_size: int = 4096  # bytes, checked before decoding
    log_level: str = "INFO"
    reload: bool = False

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
