"""Configuration constants for the merchant guide package.

This module contains the fixed vocabulary of the statement and question
language, console settings for the driver, and the optional JSON session
configuration.

Environment Variables:
    MERCHANT_GUIDE_DEBUG: Set to "1" to show error class names in console output
"""
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter

# Debug mode prints the error type next to each error message
MERCHANT_GUIDE_DEBUG = os.getenv("MERCHANT_GUIDE_DEBUG", "0") == "1"

# Statement and question language
# Both definitions and questions are split on the first occurrence of this literal
STATEMENT_SEPARATOR = " is "
CREDITS_SUFFIX = " Credits"
QUESTION_PREFIX = "how"
QUESTION_MARK = "?"
UNKNOWN_QUESTION_MESSAGE = "I have no idea what you are talking about"

# Interactive console
CONSOLE_PROMPT = ">> "
CONSOLE_EXIT_WORDS = ("exit", "quit")


class SessionConfig(BaseModel):
    """Settings for one run of the merchant guide, loaded from a JSON file.

    Example file:
        {
            "input_file": "./notes.txt",
            "output_csv": "./transcript.csv",
            "interactive": false,
            "definitions": ["glob is I", "prok is V"]
        }
    """
    input_file: Optional[str] = None
    output_csv: Optional[str] = None
    interactive: bool = False
    # Definitions applied before the input file is read
    definitions: List[str] = Field(default_factory=list)


def load_session_config(config_path: str) -> SessionConfig:
    """Load and validate a session configuration file.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        SessionConfig: The validated configuration

    Raises:
        FileNotFoundError: If the configuration file does not exist
        pydantic.ValidationError: If the file content does not match SessionConfig
    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    ta = TypeAdapter(SessionConfig)
    return ta.validate_json(config_path.read_bytes())
