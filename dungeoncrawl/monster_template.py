"""Monster descriptions and the text file format they are read from."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .character import Color
from .dice import Dice
from .npc import Ability

HEADER = "RLG327 MONSTER DESCRIPTION 1"

_COLOR_NAMES = {
    "RED": Color.RED,
    "GREEN": Color.GREEN,
    "BLUE": Color.BLUE,
    "CYAN": Color.CYAN,
    "YELLOW": Color.YELLOW,
    "MAGENTA": Color.MAGENTA,
    "WHITE": Color.WHITE,
    "BLACK": Color.BLACK,
}

_ABILITY_NAMES = {
    "SMART": Ability.SMART,
    "TELE": Ability.TELEPATHIC,
    "TUNNEL": Ability.TUNNELING,
    "ERRATIC": Ability.ERRATIC,
    "PASS": Ability.PASS,
    "PICKUP": Ability.PICKUP,
    "DESTROY": Ability.DESTROY,
    "UNIQ": Ability.UNIQUE,
    "BOSS": Ability.BOSS,
}

_COLOR_LABELS = {v: k for k, v in _COLOR_NAMES.items()}
_ABILITY_LABELS = {v: k for k, v in _ABILITY_NAMES.items()}

_FIELDS = ("NAME", "DESC", "COLOR", "SPEED", "ABIL", "HP", "DAM", "SYMB", "RRTY")

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class MonsterFileError(Exception):
    """The monster description file is missing or malformed."""


@dataclass
class MonsterTemplate:
    """A kind of monster as described in the description file."""

    name: str
    description: str
    colors: list[Color] = field(default_factory=list)
    speed: Dice = Dice(0, 0, 1)
    abilities: list[Ability] = field(default_factory=list)
    hitpoints: Dice = Dice(0, 0, 1)
    damage: Dice = Dice(0, 0, 1)
    symbol: str = "?"
    rarity: int = 0

    @classmethod
    def from_fields(
        cls,
        name: str,
        description: str,
        color: str,
        speed: str,
        abilities: str,
        hitpoints: str,
        damage: str,
        symbol: str,
        rarity: str,
    ) -> "MonsterTemplate":
        """Build a template from the raw field texts; unknown words are ignored."""
        if not symbol:
            raise ValueError("empty monster symbol")
        match = _INT_RE.match(rarity)
        if match is None:
            raise ValueError(f"not a rarity: {rarity!r}")
        return cls(
            name=name,
            description=description,
            colors=[_COLOR_NAMES[w] for w in color.split(" ") if w in _COLOR_NAMES],
            speed=Dice.parse(speed),
            abilities=[
                _ABILITY_NAMES[w] for w in abilities.split(" ") if w in _ABILITY_NAMES
            ],
            hitpoints=Dice.parse(hitpoints),
            damage=Dice.parse(damage),
            symbol=symbol[0],
            rarity=int(match.group(1)),
        )

    def describe(self) -> str:
        """A multi-line summary, one field per line."""
        colors = "".join(f"{_COLOR_LABELS[c]} " for c in self.colors)
        abilities = "".join(f"{_ABILITY_LABELS[a]} " for a in self.abilities)
        return "".join(
            f"{part}\n"
            for part in (
                self.name,
                self.description,
                colors,
                self.speed,
                abilities,
                self.hitpoints,
                self.damage,
                self.symbol,
                self.rarity,
            )
        )


def _read_description(lines: Iterator[str]) -> str:
    collected = []
    for line in lines:
        if line == ".":
            return "\n".join(collected)
        collected.append(line)
    raise MonsterFileError("description not terminated by a '.' line")


def _parse_block(lines: Iterator[str]) -> Optional[MonsterTemplate]:
    fields: dict[str, str] = {}
    for line in lines:
        keyword, _, rest = line.partition(" ")
        if keyword == "END":
            if len(fields) != len(_FIELDS):
                return None
            try:
                return MonsterTemplate.from_fields(*(fields[k] for k in _FIELDS))
            except ValueError:
                return None
        if keyword not in _FIELDS:
            continue
        if keyword in fields:
            return None
        fields[keyword] = _read_description(lines) if keyword == "DESC" else rest
    return None


def parse_monster_descriptions(lines: Iterable[str]) -> list[MonsterTemplate]:
    """Parse the lines of a description file; incomplete monsters are dropped."""
    stream = (line.rstrip("\n") for line in lines)
    if next(stream, None) != HEADER:
        raise MonsterFileError("missing monster description header")
    templates = []
    for line in stream:
        if line == "BEGIN MONSTER":
            template = _parse_block(stream)
            if template is not None:
                templates.append(template)
    return templates


def load_monster_descriptions(
    path: Union[str, os.PathLike, None] = None,
) -> list[MonsterTemplate]:
    """Read and parse a description file (the default one if no path is given)."""
    target = Path(path) if path is not None else default_monster_path()
    try:
        with open(target, encoding="utf-8") as handle:
            return parse_monster_descriptions(handle)
    except OSError as exc:
        raise MonsterFileError(f"cannot read {target}: {exc}") from exc


def default_monster_path() -> Path:
    """Where the description file lives under the user's home directory."""
    home = os.environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".rlg327" / "monster_desc.txt"