"""Interpolation configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # H3
    hex_resolution: int = 7

    # Ring radii (in hex hops)
    interpolation_ring_radius: int = 12  # a sample influences cells this many rings away
    draw_ring_radius: int = 6  # only cells this close to some sample get a result

    # Inverse distance weighting
    idw_power: float = 3.0

    # Confidence curve
    min_confidence: float = 0.25  # confidence at exactly draw_ring_radius
    confidence_radius: int = 4  # confidence stays at 1 inside this radius
    confidence_power: float = 1.0  # higher → steeper drop with distance
    saturate_confidence: bool = True

    log_level: str = "INFO"

    model_config = {
        "env_prefix": "HEXINTERP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
