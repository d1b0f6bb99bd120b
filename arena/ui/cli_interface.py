"""
User interface module for the arena.

Provides the console-based collaborator the scene controller talks to: option
menus, free-text prompts, messages and stat tables. Input goes through a
prompt_toolkit session and output through a rich console; both can be
injected, which is how the tests script a whole game.
"""

from typing import Any, Protocol

from catchery import log_debug
from prompt_toolkit import ANSI, PromptSession
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from arena.character.character_display import create_stats_table
from arena.character.main import Combatant
from arena.core.errors import InvalidChoiceError
from arena.core.utils import ccapture


class PromptSource(Protocol):
    """Anything that can read one line of text, like a PromptSession."""

    def prompt(self, message: Any, **kwargs: Any) -> str: ...


def parse_choice(answer: str, options: list[str]) -> int:
    """
    Maps a menu answer to the 1-based index of the selected option.

    The answer may be the option's number or its label; labels are compared
    case-insensitively and surrounding whitespace is ignored.

    Args:
        answer (str): The raw text typed by the player.
        options (list[str]): The options offered.

    Raises:
        InvalidChoiceError: If the answer selects none of the options.

    Returns:
        int: The 1-based index of the selected option.

    """
    text = answer.strip()
    if text.isdecimal():
        index = int(text)
        if 1 <= index <= len(options):
            return index
    for index, option in enumerate(options, 1):
        if text.casefold() == option.casefold():
            return index
    raise InvalidChoiceError(answer, options)


class PlayerInterface:
    """
    Command-line interface for player interactions in the arena.

    Shows rich tables for menus and stats and reads answers through
    prompt_toolkit, accepting either the option number or its label.
    """

    def __init__(
        self,
        session: PromptSource | None = None,
        console: Console | None = None,
        prompt_marker: str = "> ",
    ) -> None:
        """
        Initialize the PlayerInterface.

        Args:
            session (PromptSource | None): The source of input lines. A
                PromptSession is created on first use when omitted.
            console (Console | None): The console used for output.
            prompt_marker (str): The marker shown where the player types.

        """
        self._session = session
        self.console = console or Console(markup=True, width=100)
        self.prompt_marker = prompt_marker

    @property
    def session(self) -> PromptSource:
        """Returns the input session, creating a PromptSession if needed."""
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def _read(self, prompt: str) -> str:
        return self.session.prompt(ANSI(prompt))

    def get_input(self, description: str, options: list[str]) -> int:
        """
        Asks the player to pick one of the given options.

        Invalid answers are reported and the question is asked again until a
        valid option is selected.

        Args:
            description (str): The question, rich markup allowed.
            options (list[str]): The labels of the options, at least two.

        Raises:
            ValueError: If fewer than two options are given.

        Returns:
            int: The 1-based index of the selected option.

        """
        if len(options) < 2:
            raise ValueError("A menu needs at least two options")
        # Create a table of options.
        table = Table(pad_edge=False, show_header=False, box=None)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Option", style="bold")
        for i, option in enumerate(options, 1):
            table.add_row(f"{i}.", option)
        # Generate a prompt with the question and the table.
        prompt = (
            "\n"
            + ccapture(description, self.console)
            + "\n"
            + ccapture(table, self.console)
            + "\n"
            + self.prompt_marker
        )
        while True:
            answer = self._read(prompt)
            try:
                return parse_choice(answer, options)
            except InvalidChoiceError as e:
                log_debug("Invalid menu input", e.context)
                self.show("[bold red]Invalid Input[/]")

    def get_text(self, description: str) -> str:
        """
        Reads one line of free text, such as the player's name.

        Args:
            description (str): The question, rich markup allowed.

        Returns:
            str: The answer without surrounding whitespace.

        """
        prompt = "\n" + ccapture(description, self.console) + "\n" + self.prompt_marker
        return self._read(prompt).strip()

    def show(self, message: str) -> None:
        """Prints a message, rich markup allowed."""
        self.console.print(message)

    def show_rule(self, title: str = "", style: str = "bold green") -> None:
        """Prints a horizontal rule with an optional title."""
        self.console.print(Rule(title, style=style))

    def show_stats(self, combatant: Combatant) -> None:
        """Prints the stat table of a combatant followed by a blank line."""
        self.console.print(create_stats_table(combatant))
        self.console.print()
