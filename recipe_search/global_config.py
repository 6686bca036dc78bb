from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class GlobalConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
    opensearch_host: str = "localhost"
    opensearch_port: int = 9200
    index_name: str = "recipes"
    use_ssl: bool = False
    verify_certs: bool = False
    opensearch_username: Optional[str] = None
    opensearch_password: Optional[str] = None
    aws_region: Optional[str] = None
    aws_service: str = "es"
    bulk_chunk_size: int = 500
    log_level: str = "INFO"


global_config = GlobalConfig()
