from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Dual Pascal"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./dualpascal.db"

    # Security settings
    secret_key: str = "change-me"
    access_token_expire_minutes: int = 30

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Blog settings
    default_locale: str = "ja"
    default_blog_title: str = "Dual Pascal"
    public_page_size: int = 10
    dashboard_page_size: int = 20

    # Analytics provider (Umami)
    umami_base_url: str = "https://umami-miya096jps-projects.vercel.app"
    umami_username: str = "admin"
    umami_password: str = ""
    umami_site_domain: str = "localhost:8000"
    umami_connect_timeout: float = 5.0
    umami_read_timeout: float = 15.0
    umami_verify_ssl: bool = True

    # Mail settings
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_from: str = "noreply@dualpascal.com"
    contact_notification_email: str = "admin@dualpascal.com"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
