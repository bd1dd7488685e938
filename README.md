# pokeset

Work with Pokédex CSV files. You can list what a file holds and combine two
files with union, intersection and difference. The result is written to a new
CSV file.

## File format

Each line describes one Pokémon:

```
id,name,type,attack,defense,speed
```

For example:

```
1,Pikachu,ELEC,55,40,90
2,Charmander,FUEG,52,43,65
```

- `id`, `attack`, `defense` and `speed` are integers.
- `name` and `type` cannot contain commas. A name can be up to 255 characters
  and a type code up to 15.
- The known type codes are `ELEC`, `FUEG`, `PLAN`, `AGUA`, `NORM`, `FANT`,
  `PSI` and `LUCH`. Any other code is read as `NORM`.
- Malformed lines are skipped. A line longer than 255 characters is read in
  255-character pieces, and each piece is parsed as its own line.
- When an id appears more than once, only the first line with that id is kept.

Files are read and written as UTF-8, and each written line ends with `\n`.

## Command line

Show every Pokémon in a file, in file order:

```
pokeset pokedex.csv mostrar
```

Each Pokémon is printed as `id - name (attack,defense,speed)`, for example
`1 - Pikachu (55,40,90)`.

Combine two files and save the result:

```
pokeset first.csv union second.csv result.csv
pokeset first.csv interseccion second.csv result.csv
pokeset first.csv diferencia second.csv result.csv
```

- `union` keeps every Pokémon from both files: first those of the first file,
  then those of the second whose id is not in the first.
- `interseccion` keeps the Pokémon of the first file whose id is also in the
  second.
- `diferencia` keeps the Pokémon of the first file whose id is not in the
  second.

Exit status and messages:

- Fewer than two arguments: prints a usage line and exits with 1.
- A file that cannot be opened: prints `Error al leer archivo <path>` and exits
  with 1.
- An operation other than `mostrar` with fewer than four arguments: prints
  `Parametros insuficientes para operacion <operation>` and exits with 0.
- An unknown operation: prints `Operacion desconocida` and exits with 1.
- A result file that cannot be written: prints
  `Error al guardar archivo <path>` and exits with 1.
- Otherwise `Operacion <operation> realizada, guardada en <path>` is printed
  and the exit status is 0.

The command can also be run as `python -m pokeset.cli`.

## Library

```python
from pokeset.pokedex import load

first = load("first.csv")
second = load("second.csv")

print(len(first))
print(first.find_by_name("Pikachu"))
print(first.find_by_id(2))

first.union(second).save("result.csv")

for pokemon in first.intersection(second):
    print(pokemon.name, pokemon.type)
```

`pokeset.pokedex` provides:

- `PokemonType`: an enum of the type codes; each member's value is its code.
- `Pokemon`: a frozen dataclass with `id`, `name`, `type`, `attack`, `defense`
  and `speed`. `to_line()` returns its CSV line without the newline.
- `Pokedex(pokemon=())`: an ordered collection in which ids are unique. It
  supports `len()` and iteration.
  - `add(pokemon)` appends a Pokémon and returns `True`, or returns `False`
    and changes nothing when its id is already present.
  - `find_by_name(name)` returns the last Pokémon with that name, or `None`.
  - `find_by_id(pokemon_id)` returns the Pokémon with that id, or `None`.
  - `union(other)`, `intersection(other)` and `difference(other)` return new
    collections, matching Pokémon by id as the command does.
  - `for_each(func)` calls `func` on each Pokémon in order, stops at the first
    call that returns a false value, and returns how many calls returned a
    true value.
  - `save(path)` writes the collection in the format `load` reads and returns
    the collection.
- `load(path)`: reads a file into a `Pokedex`. It raises `OSError` if the file
  cannot be opened.
- `parse_line(line)`: parses one record and returns a `Pokemon`, or `None` if
  the line is malformed.
- `parse_type(code)`: returns the `PokemonType` for a code, with `NORM` for
  unknown codes.

`pokeset.cli` provides `main(argv=None)`, which runs the command and returns
its exit status, and `format_pokemon(pokemon)`, which returns the display line
used by `mostrar`.

## Tests

```
pip install -e ".[test]"
pytest
```