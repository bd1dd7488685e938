import pytest

from pokeset.cli import format_pokemon, main
from pokeset.pokedex import Pokemon, PokemonType, load

FIRST_CSV = "1,Pikachu,ELEC,55,40,90\n2,Charmander,FUEG,52,43,65\n"
SECOND_CSV = "2,Charizard,FUEG,84,78,100\n4,Squirtle,AGUA,48,65,43\n"


@pytest.fixture
def files(tmp_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    first.write_text(FIRST_CSV)
    second.write_text(SECOND_CSV)
    return first, second, tmp_path / "res.csv"


def test_format_pokemon():
    pokemon = Pokemon(1, "Pikachu", PokemonType.ELEC, 55, 40, 90)
    assert format_pokemon(pokemon) == "1 - Pikachu (55,40,90)"


def test_usage_without_arguments(capsys):
    assert main([]) == 1
    assert "Uso:" in capsys.readouterr().out


def test_show(files, capsys):
    first, _, _ = files
    assert main([str(first), "mostrar"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [format_pokemon(p) for p in load(first)]


def test_missing_first_file(tmp_path, capsys):
    missing = tmp_path / "nada.csv"
    assert main([str(missing), "mostrar"]) == 1
    assert f"Error al leer archivo {missing}" in capsys.readouterr().out


def test_missing_second_file(files, tmp_path, capsys):
    first, _, result = files
    missing = tmp_path / "nada.csv"
    assert main([str(first), "union", str(missing), str(result)]) == 1
    assert f"Error al leer archivo {missing}" in capsys.readouterr().out
    assert not result.exists()


@pytest.mark.parametrize(
    "operation, method",
    [("union", "union"), ("interseccion", "intersection"), ("diferencia", "difference")],
)
def test_set_operations_write_result(files, capsys, operation, method):
    first, second, result = files
    assert main([str(first), operation, str(second), str(result)]) == 0
    expected = getattr(load(first), method)(load(second))
    assert list(load(result)) == list(expected)
    out = capsys.readouterr().out
    assert f"Operacion {operation} realizada, guardada en {result}" in out


def test_unknown_operation(files, capsys):
    first, second, result = files
    assert main([str(first), "xor", str(second), str(result)]) == 1
    assert "Operacion desconocida" in capsys.readouterr().out
    assert not result.exists()


def test_insufficient_parameters(files, capsys):
    first, _, _ = files
    assert main([str(first), "union"]) == 0
    assert "Parametros insuficientes para operacion union" in capsys.readouterr().out