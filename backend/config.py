# Environment-driven configuration

import os
import logging
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5000


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} value '{value}', using default {default}")
        return default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid {name} value '{value}', using default {default}")
        return default


class Settings(BaseModel):
    data_file: str = "data_knowledgescout.pkl"
    upload_dir: str = "uploads"
    max_upload_size: int = 10 * 1024 * 1024
    allowed_origins: List[str] = ["*"]
    answer_delay_min: float = 0.0
    answer_delay_max: float = 0.0
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", "*").split(",")
        origins = [origin.strip() for origin in origins if origin.strip()]

        delay_min = max(_float_env("ANSWER_DELAY_MIN", 0.0), 0.0)
        delay_max = max(_float_env("ANSWER_DELAY_MAX", delay_min), delay_min)

        return cls(
            data_file=os.getenv("DATA_FILE", "data_knowledgescout.pkl"),
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
            max_upload_size=_int_env("MAX_UPLOAD_SIZE", 10 * 1024 * 1024),
            allowed_origins=origins or ["*"],
            answer_delay_min=delay_min,
            answer_delay_max=delay_max,
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int_env("PORT", DEFAULT_PORT),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
