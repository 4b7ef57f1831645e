import asyncio
import logging
import os
import shutil
import stat
from typing import Optional, Union

import aiofiles
import aiofiles.os

from .istorage_driver import IStorageDriver, ObjectContent
from .listing import build_listing
from .safe_path import ensure_confined, to_safe_local_path

logger = logging.getLogger(__name__)


class FileDriver(IStorageDriver):
    """Serves files and directories found under a base directory."""

    provider = "file"

    def __init__(self, base_path: Union[str, os.PathLike], create_base_path: bool = True):
        self.base_path = os.fspath(base_path)
        if create_base_path:
            os.makedirs(self.base_path, exist_ok=True)
        logger.info(f"Using file store, basePath: {self.base_path}")

    def _get_local_path(self, name: str) -> str:
        """Resolves a logical name to a local path, ensuring it's within the base path."""
        file_path = to_safe_local_path(self.base_path, name)
        return ensure_confined(self.base_path, file_path)

    async def does_object_exist(self, name: str) -> bool:
        file_path = self._get_local_path(name)
        try:
            await aiofiles.os.stat(file_path)
            exists = True
        except (FileNotFoundError, NotADirectoryError):
            exists = False
        except Exception as e:
            logger.error(f"Error checking existence of {file_path}: {e}")
            raise
        logger.debug(f"Checked existence for {file_path}: {exists}")
        return exists

    async def get_object(self, name: str) -> Optional[ObjectContent]:
        """
        Returns the file's bytes, or a listing tree if name is a directory.
        None means nothing exists at name; every other failure is raised.
        """
        file_path = self._get_local_path(name)
        try:
            stats = await aiofiles.os.stat(file_path)
            if stat.S_ISDIR(stats.st_mode):
                listing = await build_listing(file_path)
                logger.debug(f"Listed {len(listing)} entries in {file_path}")
                return listing

            async with aiofiles.open(file_path, mode="rb") as f:
                data = await f.read()
            logger.debug(f"Loaded {len(data)} bytes from {file_path}")
            return data
        except FileNotFoundError:
            logger.debug(f"Object not found: {file_path}")
            return None
        except Exception as e:
            logger.error(f"Error getting object {file_path}: {e}")
            raise

    async def put_object(self, name: str, content: bytes):
        file_path = self._get_local_path(name)
        try:
            parent = os.path.dirname(file_path)
            if parent:
                await aiofiles.os.makedirs(parent, exist_ok=True)
            async with aiofiles.open(file_path, mode="wb") as f:
                await f.write(content)
            logger.debug(f"Saved {len(content)} bytes to {file_path}")
        except Exception as e:
            logger.error(f"Error saving bytes to {file_path}: {e}")
            raise

    async def delete_object(self, name: str):
        """Deletes a file or a whole directory tree. Symlinks are removed, not followed."""
        file_path = self._get_local_path(name)
        try:
            stats = await aiofiles.os.stat(file_path, follow_symlinks=False)
        except FileNotFoundError:
            logger.warning(f"Attempted to delete non-existent path: {file_path}")
            return
        except Exception as e:
            logger.error(f"Error deleting {file_path}: {e}")
            raise

        try:
            if stat.S_ISDIR(stats.st_mode):
                # aiofiles has no rmtree
                await asyncio.to_thread(shutil.rmtree, file_path)
                logger.info(f"Deleted directory: {file_path}")
            else:
                await aiofiles.os.remove(file_path)
                logger.info(f"Deleted file: {file_path}")
        except FileNotFoundError:
            logger.warning(f"Path vanished before it could be deleted: {file_path}")
        except Exception as e:
            logger.error(f"Error deleting {file_path}: {e}")
            raise
