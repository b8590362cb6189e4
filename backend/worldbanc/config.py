"""worldbanc configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import socket
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings, read once at startup and never mutated."""

    app_name: str = "worldbanc"
    debug: bool = False
    log_level: str = "INFO"

    # Auth: single shared bearer token
    token: str = "TOKEN"

    # Network
    host: str = "0.0.0.0"
    port: int = 8888
    ddns: str = "NONE"
    host_name: str = Field(default_factory=socket.gethostname)

    # Path handling: "auto" picks drive-letter pathing on Windows
    platform: Literal["auto", "drive-letter", "passthrough"] = "auto"

    # Startup address discovery
    global_ip_url: str = "https://ifconfig.me/ip"
    global_ip_timeout: float = 5.0
    local_interfaces: Annotated[list[str], NoDecode] = ["en0", "イーサネット", "eth0", "Ethernet"]

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="WORLD_BANC_",
        extra="ignore",
        frozen=True,
    )

    @field_validator("local_interfaces", mode="before")
    @classmethod
    def split_interfaces(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
