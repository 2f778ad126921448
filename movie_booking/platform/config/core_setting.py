from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_booking.platform.constant.path import PROJECT_ROOT


_ENV_PATH = PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Movie Booking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    PORT: int = 8080

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'movie_booking'
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Connection pool
    DB_POOL_SIZE: int = 5
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    # Razorpay
    RAZORPAY_KEY_ID: str = ''
    RAZORPAY_KEY_SECRET: SecretStr = SecretStr('')
    PAYMENT_CURRENCY: str = 'INR'

    # Mail (issue reports)
    SMTP_HOST: str = 'smtp.gmail.com'
    SMTP_PORT: int = 587
    SMTP_STARTTLS: bool = True
    SMTP_TIMEOUT: float = 10.0
    EMAIL: str = ''
    EMAIL_PASSWORD: SecretStr = SecretStr('')
    ISSUE_REPORT_RECIPIENT: str = ''  # Falls back to EMAIL

    # Seat holds
    SEAT_HOLD_TTL_SECONDS: float = 60.0
    SEAT_HOLD_SWEEP_INTERVAL_SECONDS: float = 5.0

    # Tracing (no exporter when both are off; spans are still created)
    OTEL_EXPORTER_OTLP_ENDPOINT: str = ''
    OTEL_CONSOLE_EXPORT: bool = False
    OTEL_SAMPLE_RATIO: float = 1.0


settings = Settings()  # type: ignore
