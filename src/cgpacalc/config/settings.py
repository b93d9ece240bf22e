from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _positive_int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    try:
        parsed = int(value)
    except ValueError:
        return default
    return max(1, parsed)


@dataclass(frozen=True)
class Settings:
    data_file: str = os.getenv("CGPA_DATA_FILE", "cgpa_data.txt")
    log_level: str = os.getenv("CGPA_LOG_LEVEL", "WARNING").upper()

    max_courses: int = _positive_int_env("CGPA_MAX_COURSES", 100)

    grade_min: float = 0.0
    grade_max: float = 10.0
    credit_min: float = 0.01
    credit_max: float = 100.0


settings = Settings()
