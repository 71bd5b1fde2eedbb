from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Recipe library used when no --simulation-dir is given
    simulation_dir: Optional[Path] = None

    # exiftool binary (None = look it up on PATH)
    exiftool_executable: Optional[str] = None

    log_level: str = "WARNING"

    class Config:
        env_prefix = "FILMDETECT_"
        env_file = ".env"


settings = Settings()
