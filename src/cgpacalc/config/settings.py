from dataclasses import dataclass
import math
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default: float, *, minimum: float = 0) -> float:
    try:
        value = float(os.getenv(name, ""))
    except ValueError:
        return default
    if not math.isfinite(value) or value < minimum:
        return default
    return value


@dataclass(frozen=True)
class Settings:
    web_mode: bool = _env_flag("CGPACALC_WEB")
    port: int = int(_env_number("PORT", 8550))
    title: str = os.getenv("CGPACALC_TITLE", "CGPA Calculator")
    log_level: str = os.getenv("CGPACALC_LOG_LEVEL", "INFO").upper()

    max_credits_hint: float = _env_number("CGPACALC_MAX_CREDITS_HINT", 6)
    credits_step_hint: float = 0.5


settings = Settings()
