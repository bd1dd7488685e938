"""Command line front end: show a Pokémon file or combine two of them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pokeset.pokedex import Pokedex, Pokemon, load

__all__ = ["format_pokemon", "main"]

_PROG = "pokeset"


def format_pokemon(pokemon: Pokemon) -> str:
    """Return the display line for a Pokémon."""
    return (
        f"{pokemon.id} - {pokemon.name} "
        f"({pokemon.attack},{pokemon.defense},{pokemon.speed})"
    )


def _read(path: str) -> Pokedex | None:
    try:
        return load(path)
    except OSError:
        print(f"Error al leer archivo {path}")
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(
            f"Uso: {_PROG} <archivo1.csv> <operacion> "
            "[archivo2.csv] [resultado.csv]"
        )
        return 1

    first_path, operation = args[0], args[1]
    first = _read(first_path)
    if first is None:
        return 1

    if operation == "mostrar":
        for pokemon in first:
            print(format_pokemon(pokemon))
        return 0

    if len(args) < 4:
        print(f"Parametros insuficientes para operacion {operation}")
        return 0

    second_path, result_path = args[2], args[3]
    second = _read(second_path)
    if second is None:
        return 1

    operations = {
        "union": Pokedex.union,
        "interseccion": Pokedex.intersection,
        "diferencia": Pokedex.difference,
    }
    combine = operations.get(operation)
    if combine is None:
        print("Operacion desconocida")
        return 1

    try:
        combine(first, second).save(result_path)
    except OSError:
        print(f"Error al guardar archivo {result_path}")
        return 1
    print(f"Operacion {operation} realizada, guardada en {result_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())