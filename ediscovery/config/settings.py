from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "ediscovery"
    db_username: str = "ediscovery"
    db_password: str = "secret"

    storage_backend: str = "postgres"
    files_root: str = "uploads"
    max_upload_bytes: int = 50 * 1024 * 1024

    pdf_engine: str = "heuristic"
    pdf_scan_bytes: int = 30000

    ai_provider: str = "openai"
    pii_detection_timeout_seconds: int = 15

    ai_openai_api_key: str = ""
    ai_openai_model_name: str = "gpt-4o"
    ai_openai_timeout_seconds: int = 30
    ai_openai_temperature: float = 0.2

    ai_openai_compatible_base_url: str = ""
    ai_openai_compatible_api_key: str = ""
    ai_openai_compatible_model_name: str = ""
    ai_openai_compatible_timeout_seconds: int = 30

    ai_ollama_api_key: str = "ollama"
    ai_ollama_model_name: str = "llama3.1"
    ai_ollama_timeout_seconds: int = 60
