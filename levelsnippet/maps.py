"finds the map viewers that have already been rendered for a world"

import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PAPYRUS = "map"
BEDROCK_VIZ = "index"

# in order of preference for the main link
RENDERERS = (
    (PAPYRUS, "Papyrus Map"),
    (BEDROCK_VIZ, "Bedrock-viz Map"),
)


class MapLinks:
    def __init__(self, world_path: str, found: tuple[str, ...]) -> None:
        self._world_path = world_path
        self._found = found

    @property
    def default(self) -> str | None:
        "the directory the world name links to, if any"
        for directory, _ in RENDERERS:
            if directory in self._found:
                return directory
        return None

    @property
    def default_href(self) -> str | None:
        if self.default is None:
            return None
        return self.href(self.default)

    def href(self, directory: str) -> str:
        return f"{self._world_path}/{directory}/"

    def get(self, directory: str) -> str | None:
        return directory if directory in self._found else None


def find_map_links(
    world_directory: str | bytes | os.PathLike, world_path: str
) -> MapLinks:
    "looks for maps in world_directory, linking to them under world_path"
    world_directory = Path(world_directory)
    found = []
    for directory, label in RENDERERS:
        if (world_directory / directory).is_dir():
            logger.debug(f"found {label} in {world_directory / directory}")
            found.append(directory)
    return MapLinks(world_path, tuple(found))

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
