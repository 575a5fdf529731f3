from dataclasses import dataclass
import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass
class Settings:
    log_level: str = os.getenv("LOESS_LOG_LEVEL", "INFO")
    bandwidth: float = float(os.getenv("LOESS_BANDWIDTH", "0.5"))
    n_workers: int = int(os.getenv("LOESS_WORKERS", "1"))
    random_seed: int = int(os.getenv("LOESS_RANDOM_SEED", "0"))


settings = Settings()

__all__ = ["Settings", "settings"]
