from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"
    # Random numeric suffix appended to a slug already taken in the store
    slug_suffix_digits: int = 4
    slug_max_attempts: int = 5
    # Admin dashboard origins allowed to call the API
    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
