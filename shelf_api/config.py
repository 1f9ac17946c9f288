import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Read from the environment at import; tests build their own."""

    environment: str = os.getenv("APP_ENV", "production")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))
    # "memory" or "sql"
    store_backend: str = os.getenv("STORE_BACKEND", "memory")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./shelf.db")
    seed_data: bool = _env_flag("SEED_DATA", "true")
    data_dir: Path = field(
        default_factory=lambda: Path(os.getenv("DATA_DIR", DEFAULT_DATA_DIR))
    )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
