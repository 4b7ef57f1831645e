import logging
import sys
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storage.driver_settings import FileDriverSettings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Top-level settings object holding the nested driver config
    store: FileDriverSettings = Field(default_factory=lambda: FileDriverSettings())
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings(env_file: Optional[str] = ".env") -> Settings:
    logger.info(f"Attempting to load Settings with env_file: {env_file}")
    try:
        # The nested driver settings must read the same env file
        store_config = FileDriverSettings(_env_file=env_file)
        settings = Settings(store=store_config, _env_file=env_file)
        logging.getLogger().setLevel(settings.log_level.upper())
        logger.info(f"Successfully loaded Settings. Store provider: {settings.store.provider}")
        return settings
    except Exception as e:
        logger.error(f"Error loading Settings with env_file {env_file}: {e}", exc_info=True)
        raise


def get_driver():
    """
    Create and return the storage driver described by the current settings.

    Returns:
        Configured storage driver instance
    """
    from storage.driver_factory import create_driver

    settings = get_settings()
    return create_driver(settings.store)
