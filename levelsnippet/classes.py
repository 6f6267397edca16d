import os
import re
import logging
from datetime import datetime
from pathlib import Path

from nbtlib.tag import Byte, Compound, Int, Long, Short

from .nbt import FormatError, load_level

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

GAME_TYPES = {
    0: "Survival",
    1: "Creative",
}

DIFFICULTIES = {
    0: "Peaceful",
    1: "Easy",
    2: "Normal",
    3: "Hard",
}

INTEGER_TAGS = (Byte, Short, Int, Long)

unsafe_characters = re.compile(r"[^A-Za-z0-9_]")


class MissingFieldError(FormatError):
    def __init__(self, field: str) -> None:
        super().__init__(f"level file has no {field} field")
        self.field = field


def sanitize_path(name: str) -> str:
    "strips everything that isn't safe to put in a path or URL"
    return unsafe_characters.sub("", name)


def game_type_name(value: int | None) -> str:
    return GAME_TYPES.get(value, UNKNOWN)


def difficulty_name(value: int | None) -> str:
    return DIFFICULTIES.get(value, UNKNOWN)


def format_last_played(epoch: int | None) -> str:
    """
    formats a timestamp in seconds as a medium length date (Jan 5, 2021)
    in the local timezone
    """
    if epoch is None:
        return UNKNOWN
    try:
        played = datetime.fromtimestamp(int(epoch))
    except (OverflowError, OSError, ValueError):
        logger.warning(f"LastPlayed {epoch} is out of range")
        return UNKNOWN
    return f"{played:%b} {played.day:d}, {played.year:d}"


def _text(tag) -> str:
    # nbtlib renders str() of a tag as SNBT, with quotes
    return str.__str__(tag)


class World:
    def __init__(
        self,
        metadata: Compound,
        name: str | None = None,
        path: str | None = None,
        base_path: str | bytes | os.PathLike | None = None,
    ) -> None:
        if not isinstance(metadata, Compound):
            raise FormatError("Expected CompoundTag in level file")
        self.metadata = metadata
        self._name = name
        self._path = path
        self._base_path = Path.cwd() if base_path is None else Path(base_path)
        self._reload_data()

    @classmethod
    def load(cls, level_file: str | bytes | os.PathLike, **kwargs) -> "World":
        return cls(load_level(level_file), **kwargs)

    def _reload_data(self) -> None:
        if self._name is None:
            level_name = self.metadata.get("LevelName")
            if level_name is None:
                raise MissingFieldError("LevelName")
            if not isinstance(level_name, str):
                raise FormatError("LevelName is not a string tag")
            self._name = _text(level_name)
        if self._path is None:
            self._path = sanitize_path(self._name)
        logger.debug(f"World name: {self._name}, path: {self._path}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def base_path(self) -> Path:
        return self._base_path

    @property
    def directory(self) -> Path:
        "where the rendered maps for this world live"
        return self._base_path / self._path

    def _integer(self, field: str) -> int | None:
        "None when the field is missing or isn't an integer tag"
        tag = self.metadata.get(field)
        if tag is None:
            return None
        if not isinstance(tag, INTEGER_TAGS):
            logger.warning(f"{field} is a {type(tag).__name__}, not an integer tag")
            return None
        return int(tag)

    @property
    def seed(self) -> int:
        seed = self._integer("RandomSeed")
        return 0 if seed is None else seed

    @property
    def game_type(self) -> str:
        return game_type_name(self._integer("GameType"))

    @property
    def difficulty(self) -> str:
        return difficulty_name(self._integer("Difficulty"))

    @property
    def last_played(self) -> str:
        return format_last_played(self._integer("LastPlayed"))

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
