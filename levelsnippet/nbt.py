import os
import struct
import logging
from io import BytesIO, SEEK_END
from pathlib import Path

from nbtlib.tag import Compound

from .parser import parser

logger = logging.getLogger(__name__)

LEVEL_FILENAME = "level.dat"


class FormatError(ValueError):
    "the level file could not be decoded into a compound tag"


def locate_level(path: str | bytes | os.PathLike) -> Path:
    path = Path(path)
    # a world directory holds its metadata in level.dat
    if path.is_dir():
        return path / LEVEL_FILENAME
    return path


def read_header(stream: BytesIO):
    try:
        return parser.LevelHeader(stream)
    except EOFError:
        raise FormatError("level file is too short to hold a header") from None


def read_root(stream: BytesIO) -> Compound:
    """
    reads the named root tag and its payload, which has to be a compound
    """
    try:
        root = parser.RootTag(stream)
    except EOFError:
        raise FormatError("level file ends before its root tag") from None
    if root.tagType != Compound.tag_id:
        raise FormatError("Expected CompoundTag in level file")
    try:
        return Compound.parse(stream, byteorder="little")
    except (EOFError, IndexError, KeyError, ValueError, struct.error) as error:
        raise FormatError(f"malformed level file: {error}") from error


def load_level(path: str | bytes | os.PathLike) -> Compound:
    level_path = locate_level(path)
    logger.debug(f"reading {level_path}")
    with open(level_path, "rb") as stream:
        header = read_header(stream)
        start = stream.tell()
        size = stream.seek(0, SEEK_END) - start
        stream.seek(start)
        logger.debug(f"level version {header.version:d}, {header.length:d} bytes")
        if header.length != size:
            logger.warning(
                f"header says {header.length:d} bytes follow, file has {size:d}"
            )
        return read_root(stream)

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
