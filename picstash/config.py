# picstash/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Environment settings"""

    # API
    app_name: str = "Picstash API"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./picstash.db"
    create_tables: bool = True

    # Unsplash API
    unsplash_access_key: str
    unsplash_base_url: str = "https://api.unsplash.com"

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"

    @field_validator('unsplash_access_key')
    def validate_unsplash_access_key(cls, v):
        if not v.strip():
            raise ValueError('UNSPLASH_ACCESS_KEY is missing in .env file')
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False
