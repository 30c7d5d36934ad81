from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # HTTP API (used by the CLI client)
    api_url: str = "http://localhost:8000"
    request_timeout: float = 15.0

    # Dashboard
    dashboard_port: int = 8050

    # Form defaults
    default_compounding_frequency: int = 12


settings = Settings()
