from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    hostel_api_base_url: str = "http://localhost:8080"
    request_timeout: float = 30.0
    log_level: str = "INFO"
    max_drafts: int = 1000
    notification_max_attempts: int = 3
    notification_retry_delay: float = 2.0
    admin_cookie_name: str = "adminId"
