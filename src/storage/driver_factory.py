"""
Factory and registry for creating storage drivers from configuration.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Union

from pydantic import BaseModel

from storage.driver_settings import FileDriverSettings
from storage.drivers.file_driver import FileDriver
from storage.drivers.istorage_driver import IStorageDriver

logger = logging.getLogger(__name__)

DriverFactory = Callable[[Any], IStorageDriver]


class DriverRegistry:
    def __init__(self):
        self._factories: Dict[str, DriverFactory] = {}

    def register(self, provider: str, factory: DriverFactory):
        if provider in self._factories:
            logger.warning(f"Driver for provider '{provider}' already registered. Overwriting.")
        self._factories[provider] = factory
        logger.info(f"Registered storage driver: {provider}")

    def get(self, provider: str) -> DriverFactory:
        if provider not in self._factories:
            logger.error(f"No storage driver registered for provider '{provider}'.")
            raise KeyError(f"No storage driver registered for provider '{provider}'.")
        return self._factories[provider]

    def list_providers(self) -> List[str]:
        return list(self._factories.keys())


def _create_file_driver(config: FileDriverSettings) -> FileDriver:
    logger.info(f"Creating FileDriver with base path: {config.base_path}")
    return FileDriver(
        base_path=config.base_path, create_base_path=config.create_base_path
    )


default_registry = DriverRegistry()
default_registry.register(FileDriver.provider, _create_file_driver)


def create_driver(
    config: Union[BaseModel, Mapping[str, Any]],
    registry: DriverRegistry = default_registry,
) -> IStorageDriver:
    """
    Create the storage driver named by the configuration's provider.

    Args:
        config: Settings model for the driver, or a plain mapping that is
            validated into FileDriverSettings
        registry: Registry to look the provider up in

    Returns:
        Configured storage driver instance

    Raises:
        KeyError: If no driver is registered for the provider
        pydantic.ValidationError: If a mapping config is invalid
    """
    if isinstance(config, Mapping):
        provider = config.get("provider", FileDriver.provider)
        if provider == FileDriver.provider:
            config = FileDriverSettings(**config)
    else:
        provider = getattr(config, "provider", None)

    if provider is None:
        raise ValueError("Storage driver configuration does not name a provider")

    factory = registry.get(provider)
    return factory(config)
