import abc
from typing import List, Optional, Union

from .listing import ListingNode

ObjectContent = Union[bytes, List[ListingNode]]


class IStorageDriver(abc.ABC):
    """
    Interface for drivers exposing a storage medium through a uniform CRUD contract.
    Object names are logical, forward-slash separated paths relative to the driver's root.
    Failures are raised; absence is reported through return values.
    """

    provider: str = ""

    @abc.abstractmethod
    async def does_object_exist(self, name: str) -> bool:
        """Checks whether an object (file or directory) exists at name."""
        pass

    @abc.abstractmethod
    async def get_object(self, name: str) -> Optional[ObjectContent]:
        """Returns the object's bytes, a listing for directories, or None when nothing exists at name."""
        pass

    @abc.abstractmethod
    async def put_object(self, name: str, content: bytes):
        """Writes content to name, creating intermediate directories as needed."""
        pass

    @abc.abstractmethod
    async def delete_object(self, name: str):
        """Removes the object at name, recursively for directories. Missing objects are ignored."""
        pass
