import logging
import os
from typing import Annotated, Any, Dict, List, Literal, Union

import aiofiles.os
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class FileNode(BaseModel):
    kind: Literal["file"] = "file"
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "file", "name": self.name}


class DirectoryNode(BaseModel):
    kind: Literal["directory"] = "directory"
    name: str
    children: List["ListingNode"] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Renders the node in the listing shape served to HTTP clients."""
        return {
            "type": "directory",
            "name": self.name,
            "objects": [child.to_dict() for child in self.children],
        }


ListingNode = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()


async def build_listing(dir_path: str) -> List[ListingNode]:
    """
    Builds the full listing tree below dir_path.

    Children are visited depth-first in directory enumeration order. Symlinks are
    followed, so a link pointing at a directory is listed as one.
    """
    output: List[ListingNode] = []
    for name in await aiofiles.os.listdir(dir_path):
        logger.debug(f"Found file object: {name} on path: {dir_path}")
        obj_path = os.path.join(dir_path, name)
        if await aiofiles.os.path.isdir(obj_path):
            output.append(DirectoryNode(name=name, children=await build_listing(obj_path)))
        else:
            output.append(FileNode(name=name))
    return output


def listing_to_dicts(listing: List[ListingNode]) -> List[Dict[str, Any]]:
    return [node.to_dict() for node in listing]
