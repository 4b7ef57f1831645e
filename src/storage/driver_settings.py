import logging
from typing import Any, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class FileDriverSettings(BaseSettings):
    """Settings for the filesystem driver."""

    # Allow ignoring extra fields from environment
    model_config = SettingsConfigDict(
        env_prefix="STORE_", extra="ignore", populate_by_name=True
    )

    provider: Literal["file"] = "file"
    base_path: str = Field(validation_alias="STORE_BASE_PATH")
    create_base_path: bool = Field(
        default=True, validation_alias="STORE_CREATE_BASE_PATH"
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_base_path(cls, data: Any) -> Any:
        if isinstance(data, dict):
            # Check for both the field name and the environment variable name
            path = data.get("base_path") or data.get("STORE_BASE_PATH")
            if path is None:
                raise ValueError("base_path is required for the file driver")
            data["STORE_BASE_PATH"] = str(path)
            data.pop("base_path", None)
            # Directory creation is left to the driver
        return data
