"""Saving and loading dungeons in the binary level format."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Any, Optional, Union

from .layout import DUNGEON_X, DUNGEON_Y, Room, Stair, Terrain

FILE_TYPE = b"RLG327-S2019"
_FIXED_SIZE = 1708


class DungeonFileError(Exception):
    """A dungeon file could not be read, written or understood."""


def dungeon_dir() -> Path:
    """The game's directory under the user's home directory."""
    home = os.environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".rlg327"


def default_save_path() -> Path:
    """The file a dungeon is saved to and loaded from by default."""
    return dungeon_dir() / "Dungeon"


def saved_dungeon_path(name: str) -> Path:
    """The path of a named dungeon in the saved-dungeons directory."""
    return dungeon_dir() / "saved_Dungeons" / name


def encode_dungeon(dungeon: Any) -> bytes:
    """Serialise the dungeon's player position, hardness, rooms and stairs."""
    size = (
        _FIXED_SIZE
        + 4 * len(dungeon.rooms)
        + 2 * len(dungeon.up_stairs)
        + 2 * len(dungeon.down_stairs)
    )
    try:
        parts = [
            FILE_TYPE,
            struct.pack(">II", dungeon.file_version, size),
            bytes((dungeon.player.x, dungeon.player.y)),
            *(bytes(row) for row in dungeon.hardness),
            struct.pack(">H", len(dungeon.rooms)),
            *(bytes((r.x, r.y, r.width, r.height)) for r in dungeon.rooms),
            struct.pack(">H", len(dungeon.up_stairs)),
            *(bytes((s.x, s.y)) for s in dungeon.up_stairs),
            struct.pack(">H", len(dungeon.down_stairs)),
            *(bytes((s.x, s.y)) for s in dungeon.down_stairs),
        ]
    except (ValueError, struct.error) as exc:
        raise DungeonFileError(f"dungeon cannot be encoded: {exc}") from exc
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def take(self, count: int) -> bytes:
        end = self._offset + count
        if end > len(self._data):
            raise DungeonFileError("dungeon data is truncated")
        chunk = self._data[self._offset:end]
        self._offset = end
        return chunk

    def u16(self) -> int:
        return struct.unpack(">H", self.take(2))[0]

    def u32(self) -> int:
        return struct.unpack(">I", self.take(4))[0]


def _rebuild_terrain(dungeon: Any) -> None:
    for y in range(DUNGEON_Y):
        for x in range(DUNGEON_X):
            h = dungeon.hardness[y][x]
            if h == 255:
                terrain = Terrain.IMMUTABLE
            elif h:
                terrain = Terrain.WALL
            elif any(room.contains(x, y) for room in dungeon.rooms):
                terrain = Terrain.FLOOR
            else:
                terrain = Terrain.CORRIDOR
            dungeon.map[y][x] = terrain
            border = y in (0, DUNGEON_Y - 1) or x in (0, DUNGEON_X - 1)
            dungeon.seen[y][x] = Terrain.IMMUTABLE if border else Terrain.UNKNOWN
    for stair in dungeon.up_stairs:
        dungeon.map[stair.y][stair.x] = Terrain.STAIR_UP
    for stair in dungeon.down_stairs:
        dungeon.map[stair.y][stair.x] = Terrain.STAIR_DOWN


def decode_dungeon(data: bytes, dungeon: Any) -> None:
    """Fill ``dungeon`` from serialised data and rebuild its terrain map."""
    reader = _Reader(bytes(data))
    reader.take(len(FILE_TYPE))
    version = reader.u32()
    size = reader.u32()
    px, py = reader.take(2)
    hardness = [list(reader.take(DUNGEON_X)) for _ in range(DUNGEON_Y)]
    rooms = [Room(*reader.take(4)) for _ in range(reader.u16())]
    up = [Stair(*reader.take(2), "u") for _ in range(reader.u16())]
    down = [Stair(*reader.take(2), "d") for _ in range(reader.u16())]

    dungeon.file_version = version
    dungeon.file_size = size
    dungeon.player.x = dungeon.player.next_x = px
    dungeon.player.y = dungeon.player.next_y = py
    dungeon.hardness = hardness
    dungeon.rooms = rooms
    dungeon.up_stairs = up
    dungeon.down_stairs = down
    _rebuild_terrain(dungeon)


def save_dungeon(dungeon: Any, path: Union[str, os.PathLike, None] = None) -> Path:
    """Write the dungeon to ``path`` (the default save file if omitted)."""
    target = Path(path) if path is not None else default_save_path()
    data = encode_dungeon(dungeon)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise DungeonFileError(f"cannot write {target}: {exc}") from exc
    return target


def load_dungeon(dungeon: Any, path: Optional[Union[str, os.PathLike]] = None) -> None:
    """Read the dungeon from ``path`` (the default save file if omitted)."""
    target = Path(path) if path is not None else default_save_path()
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise DungeonFileError(f"cannot read {target}: {exc}") from exc
    decode_dungeon(data, dungeon)