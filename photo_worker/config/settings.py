from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    compression_quality: int = 40
    compression_size_ceiling_bytes: int = 37_500
    compression_max_width: int = 400
    compression_max_height: int = 600

    photo_api_base_url: str = "https://alice-smith.isamshosting.cloud/Main/api"
    photo_api_token: str = ""
    http_timeout_seconds: int = 30
    upload_target: str = "dry_run"

    batch_concurrency: int = 8

    records_path: str = "records.csv"
    records_have_header: bool = True
    report_path: str = "photo_report.csv"
    report_min_original_bytes: int = 0
    failed_photos_dir: str = ""
