from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    # Reject bytes left over after the last attribute record; set false to tolerate padding.
    strict_length: bool = Field(True, validation_alias="ZIGBEELINK_STRICT_LENGTH")

    log_ring_size: int = Field(200, ge=1, validation_alias="ZIGBEELINK_LOG_RING_SIZE")
    log_level: str = Field("INFO", validation_alias="ZIGBEELINK_LOG_LEVEL")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
