from pathlib import Path
from typing import Annotated, List, Literal

import orjson
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.platform.constant.path import DEFAULT_MENU_DATA_PATH


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Restaurant Table Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_TIMEZONE: str = 'Europe/Berlin'

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        elif isinstance(v, str):
            return orjson.loads(v)
        return []

    # Tables are fixed at startup, never created or removed at runtime
    TABLE_IDS: Annotated[List[int], NoDecode] = list(range(1, 11))

    @field_validator('TABLE_IDS', mode='before')
    @classmethod
    def assemble_table_ids(cls, v: str | List[int]) -> List[int]:
        if isinstance(v, str) and not v.startswith('['):
            return sorted({int(i.strip()) for i in v.split(',') if i.strip()})
        elif isinstance(v, list):
            return sorted({int(i) for i in v})
        elif isinstance(v, str):
            return sorted({int(i) for i in orjson.loads(v)})
        return list(range(1, 11))

    # Static menu catalog (JSON)
    MENU_DATA_PATH: Path = DEFAULT_MENU_DATA_PATH

    # 'free': any active status may replace any other (staff can correct a misclick)
    # 'forward': only the same or a later status is accepted
    ORDER_STATUS_TRANSITION_POLICY: Literal['free', 'forward'] = 'free'

    # SSE
    SSE_HEARTBEAT_INTERVAL: int = Field(default=30, ge=1)  # seconds between ping comments
    SUBSCRIBER_BUFFER_SIZE: int = 10  # a channel whose buffer is full counts as a failed send


settings = Settings()  # type: ignore
