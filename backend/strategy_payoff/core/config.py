from typing import List

from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    app_env: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # Generated spot grid: [low * reference, high * reference] every `step` units
    spot_range_low: float = float(os.getenv("SPOT_RANGE_LOW", "0.85"))
    spot_range_high: float = float(os.getenv("SPOT_RANGE_HIGH", "1.15"))
    spot_step: float = float(os.getenv("SPOT_STEP", "1.0"))
    # Upper bound on sampled points, generated or caller-supplied
    max_spot_points: int = int(os.getenv("MAX_SPOT_POINTS", "10000"))

    default_lot_size: int = int(os.getenv("DEFAULT_LOT_SIZE", "1"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
