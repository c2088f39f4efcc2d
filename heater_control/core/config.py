from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Heater Panel Control"

    # Mode: "sim" for development; "rpi" on the Raspberry Pi
    hardware_mode: str = Field(default="sim")

    # Polling
    poll_interval_seconds: float = 5.0

    # Capture
    image_width: int = 1640
    image_height: int = 1232
    capture_command: str = "libcamera-still"   # newer images ship "rpicam-still"
    capture_timeout_seconds: float = 20.0

    # Lamp regions and thresholds (JSON)
    calibration_path: str = Field(
        default=str(PACKAGE_DIR / "config" / "calibration.json")
    )

    # Heater output (BCM numbering)
    heater_pin: int = 2
    heater_readback: bool = True

    # Logging
    log_file: str = "heater.log"
    log_level: str = "INFO"

    # Web UI
    static_dir: str = Field(default=str(PACKAGE_DIR / "static"))


settings = Settings()
