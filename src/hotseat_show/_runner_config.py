# Area: Shared
"""
hotseat_show._runner_config — Runner Configuration
===================================================

Configuration model and loader for ShowRunner.

Values are layered: model defaults, then an optional JSON config file,
then ``HOTSEAT_*`` environment variables (a ``.env`` file is read first).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger("hotseat_show")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> config key
ENV_MAPPINGS = {
    "HOTSEAT_LOG_FILE": "log_file",
    "HOTSEAT_LOG_LEVEL": "log_level",
    "HOTSEAT_POLL_INTERVAL_SECONDS": "poll_interval_seconds",
    "HOTSEAT_TIME_SCALE": "time_scale",
    "HOTSEAT_FASTEST_FINGER_BANK": "fastest_finger_bank_path",
    "HOTSEAT_HOT_SEAT_BANK": "hot_seat_bank_path",
    "HOTSEAT_DEMO_CONTESTANTS": "demo_contestants",
    "HOTSEAT_DEMO_SHOW_HOST": "demo_show_host",
    "HOTSEAT_MAX_ROUNDS": "max_rounds",
    "HOTSEAT_RANDOM_SEED": "random_seed",
    "HOTSEAT_PHASE_MODE": "phase_mode",
}


class ShowConfig(BaseModel):
    """Settings for a locally run show."""
    model_config = ConfigDict(extra="forbid")

    log_file: str = "hotseat_show.log"
    log_level: str = "INFO"
    poll_interval_seconds: float = Field(0.05, gt=0)
    time_scale: float = Field(1.0, ge=0)
    fastest_finger_bank_path: Optional[str] = None
    hot_seat_bank_path: Optional[str] = None
    demo_contestants: int = Field(3, ge=1, le=12)
    demo_show_host: bool = False
    max_rounds: Optional[int] = Field(None, ge=1)
    random_seed: Optional[int] = None
    phase_mode: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: Any) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("fastest_finger_bank_path", "hot_seat_bank_path", "max_rounds",
                     "random_seed", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def read_config_file(config_path: Union[str, Path, None]) -> Dict[str, Any]:
    """Read a JSON config file. A missing file yields an empty config."""
    if not config_path:
        return {}
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file {path} not found, using defaults")
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")
    return data


def env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect config values from HOTSEAT_* environment variables."""
    environ = os.environ if environ is None else environ
    return {
        config_key: environ[env_key]
        for env_key, config_key in ENV_MAPPINGS.items()
        if env_key in environ
    }


def validate_config(config: Mapping[str, Any]) -> ShowConfig:
    """
    Validate a raw configuration mapping.

    Raises:
        ValueError: If any value is missing its constraints or unknown
    """
    try:
        return ShowConfig.model_validate(dict(config))
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ValueError(f"Invalid configuration: {'; '.join(problems)}") from e


def load_config(config_path: Union[str, Path, None] = None,
                dotenv_path: Union[str, Path, None] = None,
                environ: Optional[Mapping[str, str]] = None) -> ShowConfig:
    """Load config from file, then environment, and validate it."""
    config = read_config_file(config_path)
    if environ is None:
        load_dotenv(dotenv_path)
    config.update(env_overrides(environ))
    return validate_config(config)
