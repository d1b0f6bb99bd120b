from .cli_interface import PlayerInterface, parse_choice

__all__ = ["PlayerInterface", "parse_choice"]
