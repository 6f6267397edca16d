from __future__ import annotations

import struct
from io import BytesIO
from pathlib import Path

import pytest
from nbtlib.tag import Compound, Int, Long, String

# 2020-09-13 12:26:40 UTC
LAST_PLAYED = 1_600_000_000
LAST_PLAYED_DATES = {"Sep 13, 2020", "Sep 14, 2020"}


def achievements_world() -> Compound:
    return Compound(
        {
            "LevelName": String("acheivements world"),
            "RandomSeed": Long(-1234567890123),
            "GameType": Int(1),
            "Difficulty": Int(2),
            "LastPlayed": Long(LAST_PLAYED),
            "StorageVersion": Int(8),
        }
    )


def level_bytes(root: Compound, version: int = 8, length: int | None = None) -> bytes:
    body = BytesIO()
    # named root tag with an empty name
    body.write(struct.pack("<BH", Compound.tag_id, 0))
    root.write(body, byteorder="little")
    payload = body.getvalue()
    if length is None:
        length = len(payload)
    return struct.pack("<II", version, length) + payload


@pytest.fixture
def level_file(tmp_path: Path) -> Path:
    path = tmp_path / "test_level.dat"
    path.write_bytes(level_bytes(achievements_world()))
    return path
