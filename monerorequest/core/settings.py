import os
from pathlib import Path

from environs import Env  # type: ignore
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

env = Env()

VERSION = "0.1.0"


def find_env_file():
    # env file: default to current dir, else home dir
    env_file = os.path.join(os.getcwd(), ".env")
    if not os.path.isfile(env_file):
        env_file = os.path.join(str(Path.home()), ".monero-request", ".env")
    if os.path.isfile(env_file):
        env.read_env(env_file, recurse=False, override=True)
    else:
        env_file = ""
    return env_file


class MoneroRequestSettings(BaseSettings):
    env_file: str = Field(default="")

    model_config = SettingsConfigDict(
        env_file=find_env_file() or None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class EnvSettings(MoneroRequestSettings):
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")


class CodecSettings(MoneroRequestSettings):
    request_version: str = Field(
        default="1",
        title="Request version",
        description="Version token written by encode.",
    )
    strict_decode: bool = Field(
        default=False,
        title="Strict decode",
        description=(
            "Raise on numeric fields that cannot be coerced to integers instead"
            " of falling back to 0."
        ),
    )


class WalletSettings(MoneroRequestSettings):
    wallet_allow_standard: bool = Field(default=True)
    wallet_allow_integrated: bool = Field(default=True)
    wallet_allow_subaddress: bool = Field(default=False)


class Settings(
    EnvSettings,
    CodecSettings,
    WalletSettings,
):
    version: str = Field(default=VERSION)


settings = Settings()
settings.env_file = find_env_file()
