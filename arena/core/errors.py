"""
Error types raised by the arena.
"""

from typing import Any


class InvalidChoiceError(ValueError):
    """Raised when a menu answer matches neither an option label nor its index.

    Attributes:
        answer (str): The raw text that was entered.
        options (list[str]): The options that were offered.

    """

    def __init__(self, answer: str, options: list[str]) -> None:
        self.answer = answer
        self.options = list(options)
        super().__init__(f"'{answer}' is not one of {self.options}")

    @property
    def context(self) -> dict[str, Any]:
        """Returns the logging context for this error."""
        return {"answer": self.answer, "options": self.options, "context": "menu_input"}
