from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    bcrypt_rounds: int = 12

    # HTTP
    service_name: str = "pdf-annotator"
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000
    localhost_frontend_url: str = "http://localhost:5173"
    production_frontend_url: str = ""

    log_level: str = "INFO"
    sql_echo: bool = False
    create_tables_on_startup: bool = True

    # Хранилище файлов: "s3" или "memory"
    blob_store_backend: str = "s3"
    s3_bucket: str = ""
    s3_region: str = "us-east-1"
    s3_endpoint_url: Optional[str] = None
    s3_key_prefix: str = "pdf-annotator"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    presigned_url_expires_seconds: int = 3600
    blob_store_timeout_seconds: float = 10.0

    max_upload_bytes: int = 20 * 1024 * 1024

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def allowed_origins(self) -> List[str]:
        """Список разрешенных источников для CORS"""
        origins = [self.localhost_frontend_url, self.production_frontend_url]
        return [origin for origin in origins if origin]


settings = Settings()
