"""Validation utilities for the merchant guide package.

This module checks the paths handed to the driver before any line is
processed, so that a typo in a file name fails early with a clear message.
"""
from pathlib import Path


def validate_directory(path: Path, name: str = "Directory") -> None:
    """Validate that a path exists and is a directory.

    Args:
        path: Path object to validate
        name: Descriptive name for the path, used in error messages

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not path.is_dir():
        raise ValueError(f"Error: {name} is not a valid directory: {path}")


def validate_file(path: Path, name: str = "File") -> None:
    """Validate that a path exists and is a file.

    Used for the notes file with definitions and questions.

    Args:
        path: Path object to validate
        name: Descriptive name for the file, used in error messages
              (e.g., "Input file")

    Raises:
        ValueError: If path does not exist or is not a file

    Example:
        >>> validate_file(Path("./notes.txt"), "Input file")
        # Raises ValueError if notes.txt doesn't exist
    """
    if not path.is_file():
        raise ValueError(f"Error: {name} not found: {path}")


def validate_csv_output(path: Path, name: str = "Output CSV") -> None:
    """Validate that a path can be used to write a CSV file.

    The file itself does not need to exist yet, but it must have a .csv
    extension and its parent directory must exist.

    Args:
        path: Path object to validate
        name: Descriptive name for the file, used in error messages

    Raises:
        ValueError: If the extension is not .csv or the parent directory is missing
    """
    if path.suffix != ".csv":
        raise ValueError(f"Error: {name} is not a CSV file: {path}")
    validate_directory(path.parent, f"{name} directory")
