"""Read, search, combine and write Pokédex CSV files, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["pokedex", "cli"]