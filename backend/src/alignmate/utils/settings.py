import os
from typing import Any

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_LANGUAGE,
    ENV_ALIGN_ASSIGNMENTS,
    ENV_ALIGN_DECLARATIONS,
    ENV_LANGUAGE,
)


class AlignmentSettings(BaseModel):
    vertically_align_after_assignments: bool = Field(
        default=True,
        description="Insert spaces so that assignment operators on adjacent lines line up.",
    )
    vertically_align_after_types_and_modifiers: bool = Field(
        default=True,
        description="Insert spaces so that variable names after types and modifiers line up.",
    )
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        min_length=1,
        description="Pygments lexer alias used to find variable declarations.",
    )

    @classmethod
    def from_env(cls) -> "AlignmentSettings":
        values = {
            "vertically_align_after_assignments": os.getenv(ENV_ALIGN_ASSIGNMENTS),
            "vertically_align_after_types_and_modifiers": os.getenv(
                ENV_ALIGN_DECLARATIONS
            ),
            "language": os.getenv(ENV_LANGUAGE),
        }
        # Pydantic turns "true" / "0" / "off" into booleans
        return cls(**{key: value for key, value in values.items() if value is not None})


def get_settings(data: dict[str, Any]) -> AlignmentSettings:
    """
    Builds the settings for one alignment run.

    Values present in ``data`` (request body or command line arguments) take precedence
    over the environment, which in turn takes precedence over the defaults.
    """
    settings = AlignmentSettings.from_env().model_dump()
    overrides = {
        "vertically_align_after_assignments": data.get("do_align_assignments"),
        "vertically_align_after_types_and_modifiers": data.get("do_align_declarations"),
        "language": data.get("language"),
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return AlignmentSettings(**settings)
