"""Pokémon collections loaded from CSV files, with set operations keyed by id."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import TextIO, Union

__all__ = [
    "PokemonType",
    "Pokemon",
    "Pokedex",
    "parse_type",
    "parse_line",
    "load",
]

PathType = Union[str, "PathLike[str]"]

_LINE_LIMIT = 255
_NAME_LIMIT = 255
_TYPE_LIMIT = 15

_INT = r"\s*([+-]?\d+)"
_LINE_RE = re.compile(
    _INT
    + r",([^,]{1,%d}),([^,]{1,%d}),"  # name and type: no commas, bounded length
    % (_NAME_LIMIT, _TYPE_LIMIT)
    + _INT
    + ","
    + _INT
    + ","
    + _INT
)
_EOL_RE = re.compile(r"[\r\n]")


class PokemonType(Enum):
    """Pokémon types, valued by their four-letter file code."""

    ELEC = "ELEC"
    FUEG = "FUEG"
    PLAN = "PLAN"
    AGUA = "AGUA"
    NORM = "NORM"
    FANT = "FANT"
    PSI = "PSI"
    LUCH = "LUCH"


@dataclass(frozen=True)
class Pokemon:
    """A single Pokémon record."""

    id: int
    name: str
    type: PokemonType
    attack: int
    defense: int
    speed: int

    def to_line(self) -> str:
        """Return the CSV line (without newline) that describes this Pokémon."""
        return (
            f"{self.id},{self.name},{self.type.value},"
            f"{self.attack},{self.defense},{self.speed}"
        )


def parse_type(code: str) -> PokemonType:
    """Map a type code to a PokemonType; unknown codes become NORM."""
    try:
        return PokemonType(code)
    except ValueError:
        return PokemonType.NORM


def _cut_at_eol(text: str) -> str:
    return _EOL_RE.split(text, maxsplit=1)[0]


def parse_line(line: str) -> Pokemon | None:
    """Parse one CSV record, returning None when the line is malformed."""
    match = _LINE_RE.match(line)
    if match is None:
        return None
    raw_id, name, type_code, attack, defense, speed = match.groups()
    return Pokemon(
        id=int(raw_id),
        name=_cut_at_eol(name),
        type=parse_type(_cut_at_eol(type_code)),
        attack=int(attack),
        defense=int(defense),
        speed=int(speed),
    )


def _records(handle: TextIO) -> Iterator[str]:
    """Yield the file's lines, splitting overly long ones into bounded pieces."""
    for line in handle:
        while len(line) > _LINE_LIMIT:
            yield line[:_LINE_LIMIT]
            line = line[_LINE_LIMIT:]
        yield line


class Pokedex:
    """An ordered collection of Pokémon with unique ids."""

    def __init__(self, pokemon: Iterable[Pokemon] = ()) -> None:
        self._pokemon: list[Pokemon] = []
        self._ids: set[int] = set()
        for entry in pokemon:
            self.add(entry)

    def __len__(self) -> int:
        return len(self._pokemon)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self._pokemon)

    def __repr__(self) -> str:
        return f"Pokedex({self._pokemon!r})"

    def add(self, pokemon: Pokemon) -> bool:
        """Append a Pokémon unless its id is already present; return whether it was added."""
        if pokemon.id in self._ids:
            return False
        self._pokemon.append(pokemon)
        self._ids.add(pokemon.id)
        return True

    def find_by_name(self, name: str) -> Pokemon | None:
        """Return the last Pokémon with the given name, or None."""
        found = None
        for pokemon in self._pokemon:
            if pokemon.name == name:
                found = pokemon
        return found

    def find_by_id(self, pokemon_id: int) -> Pokemon | None:
        """Return the Pokémon with the given id, or None."""
        for pokemon in self._pokemon:
            if pokemon.id == pokemon_id:
                return pokemon
        return None

    def union(self, other: Pokedex) -> Pokedex:
        """Return all Pokémon of both, preferring this collection's on shared ids."""
        return Pokedex([*self._pokemon, *other])

    def intersection(self, other: Pokedex) -> Pokedex:
        """Return this collection's Pokémon whose id is also in the other."""
        other_ids = {pokemon.id for pokemon in other}
        return Pokedex(p for p in self._pokemon if p.id in other_ids)

    def difference(self, other: Pokedex) -> Pokedex:
        """Return this collection's Pokémon whose id is not in the other."""
        other_ids = {pokemon.id for pokemon in other}
        return Pokedex(p for p in self._pokemon if p.id not in other_ids)

    def for_each(self, func: Callable[[Pokemon], object]) -> int:
        """Call func on each Pokémon in order until it returns a false value.

        Returns how many calls returned a true value.
        """
        count = 0
        for pokemon in self._pokemon:
            if not func(pokemon):
                break
            count += 1
        return count

    def save(self, path: PathType) -> Pokedex:
        """Write the collection to a CSV file that load() reads back."""
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            for pokemon in self._pokemon:
                handle.write(pokemon.to_line() + "\n")
        return self


def load(path: PathType) -> Pokedex:
    """Read a CSV file, skipping malformed lines and repeated ids."""
    with open(path, encoding="utf-8", newline="") as handle:
        pokedex = Pokedex()
        for record in _records(handle):
            pokemon = parse_line(record)
            if pokemon is not None:
                pokedex.add(pokemon)
        return pokedex