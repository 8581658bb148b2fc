from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BIND_ADDR = "127.0.0.1:3000"


def split_bind_addr(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"expected host:port, got {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    port_num = int(port)
    if not 0 < port_num < 65536:
        raise ValueError(f"port out of range in {addr!r}")
    return host, port_num


class Settings(BaseSettings):
    # BIND_ADDR is read without the prefix for compatibility with existing deployments.
    bind_addr: str = Field(
        default=DEFAULT_BIND_ADDR,
        validation_alias=AliasChoices("bind_addr", "joblist_bind_addr"),
    )
    data_file: Path = Path("db.json")
    templates_dir: Path = Path("templates")
    static_dir: Path = Path("static")
    enable_health: bool = True
    enable_security_headers: bool = True
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"

    model_config = SettingsConfigDict(
        env_prefix="JOBLIST_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("bind_addr")
    @classmethod
    def _check_bind_addr(cls, value: str) -> str:
        split_bind_addr(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value

    @property
    def host(self) -> str:
        return split_bind_addr(self.bind_addr)[0]

    @property
    def port(self) -> int:
        return split_bind_addr(self.bind_addr)[1]
