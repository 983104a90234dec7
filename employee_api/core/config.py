from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    db_name: str = "employees"
    db_user: str = "employees"
    db_password: str = "CHANGE_ME"
    db_host: str = "db"
    db_port: int = 5432
    db_ssl: bool = False

    # CORS
    cors_allowed_origins: str = "http://localhost:5173,http://localhost:3000"

    # Pagination
    default_page_size: int = 4
    max_page_size: int = 100
    max_page_number: int = 1_000_000

    # Password hashing
    bcrypt_rounds: int = 12

    # App
    debug: bool = False
    expose_error_details: bool = False
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        base = (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )
        return f"{base}?ssl=require" if self.db_ssl else base

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    model_config = {"env_file": ".env", "extra": "ignore"}

    def validate_secrets(self) -> None:
        """Raise on inconsistent paging settings, or default secrets outside debug."""
        if self.default_page_size < 1 or self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must be between 1 and max_page_size")
        if self.debug:
            return
        if self.db_password == "CHANGE_ME":
            raise ValueError("db_password must be changed from default")


settings = Settings()
