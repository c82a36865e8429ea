"""
Core configuration for the Baseball Stats API.
Manages environment variables and storage backend settings.
"""
import os
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""
    
    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Baseball Stats API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Local storage
    data_dir: str = os.getenv("DATA_DIR", "data")
    csv_filename: str = os.getenv("CSV_FILENAME", "stats.csv")
    last_update_filename: str = os.getenv("LAST_UPDATE_FILENAME", "lastUpdate.json")
    public_dir: str = os.getenv("PUBLIC_DIR", "public")
    
    # Storage backend: "local" or "s3"
    storage_backend: str = os.getenv("STORAGE_BACKEND", "local")
    
    # AWS Configuration
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    s3_bucket_name: str = os.getenv("S3_BUCKET_NAME", "")
    s3_prefix: str = os.getenv("S3_PREFIX", "data")
    
    # CORS, comma separated
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")
    
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")
    
    @property
    def csv_path(self) -> Path:
        return Path(self.data_dir) / self.csv_filename
    
    @property
    def last_update_path(self) -> Path:
        return Path(self.data_dir) / self.last_update_filename
    
    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
