"""
Runtime settings for the arena.
"""

import logging

from pydantic import BaseModel, Field


class GameSettings(BaseModel):
    """Settings consumed by the entry point and the command-line interface."""

    log_level: int = Field(
        default=logging.WARNING,
        description="The level passed to the rich logging handler.",
    )
    console_width: int = Field(
        default=100,
        description="The width of the rich consoles, in characters.",
        gt=0,
    )
    prompt_marker: str = Field(
        default="> ",
        description="The marker shown where the player types an answer.",
    )
    farewell_message: str = Field(
        default="Farewell, warrior.",
        description="The message shown when the game shuts down.",
    )


DEFAULT_SETTINGS = GameSettings()
