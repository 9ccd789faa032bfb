"""Feed notes to a knowledge base line by line and record what happened.

This module is the driver around KnowledgeBase. It decides for every input
line whether it is a question or a definition, prints answers and errors to
the console, and keeps a transcript of the session that can be saved as CSV.

Routing rule:
    A line starting with "how" or ending with "?" is a question, every other
    non-blank line is a definition.
"""
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import pandas as pd

from .common.config import (
    CONSOLE_EXIT_WORDS,
    CONSOLE_PROMPT,
    MERCHANT_GUIDE_DEBUG,
    QUESTION_MARK,
    QUESTION_PREFIX,
)
from .common.errors import MerchantGuideError
from .common.progress import ProgressPrinter
from .common.validators import validate_csv_output, validate_file
from .knowledge_base import KnowledgeBase

TRANSCRIPT_COLUMNS = ["line", "kind", "result", "error"]


def is_question(line: str) -> bool:
    """Return True if the line should be answered rather than defined."""
    return line.startswith(QUESTION_PREFIX) or line.endswith(QUESTION_MARK)


def format_error(error: MerchantGuideError) -> str:
    """Render an error the way it is shown on the console."""
    if MERCHANT_GUIDE_DEBUG:
        return f"Error: [{type(error).__name__}] {error}"
    return f"Error: {error}"


def process_line(kb: KnowledgeBase, line: str) -> Dict[str, str]:
    """Route one line to the knowledge base and record the outcome.

    Errors raised by the knowledge base are caught and stored in the record;
    they never stop the session.

    Args:
        kb: Knowledge base to update or query
        line: One input line, already known to be non-blank

    Returns:
        dict: Transcript record with keys:
            - line: The stripped input line
            - kind: "question" or "definition"
            - result: The answer for questions, empty otherwise
            - error: The error message, empty on success

    Example:
        >>> process_line(kb, "how much is pish tegj glob glob ?")
        {'line': 'how much is pish tegj glob glob ?', 'kind': 'question',
         'result': 'pish tegj glob glob is 42', 'error': ''}
    """
    line = line.strip()
    kind = "question" if is_question(line) else "definition"
    record = {"line": line, "kind": kind, "result": "", "error": ""}

    try:
        if kind == "question":
            record["result"] = kb.answer(line)
        else:
            kb.define(line)
    except MerchantGuideError as e:
        record["error"] = format_error(e)

    return record


def _echo(record: Dict[str, str]) -> None:
    if record["error"]:
        print(record["error"])
    elif record["result"]:
        print(record["result"])


def process_lines(kb: KnowledgeBase, lines: Iterable[str], echo: bool = True) -> List[Dict[str, str]]:
    """Process lines in order, skipping blank ones.

    Args:
        kb: Knowledge base to update or query
        lines: Input lines in the order they should be applied
        echo: Print each answer and error as it happens. When False a
              progress counter is shown instead.

    Returns:
        list: One transcript record per non-blank line, see process_line()
    """
    lines = [line for line in lines if line.strip()]
    if not echo:
        lines = ProgressPrinter("Processing lines", len(lines)).track(lines)

    records = []
    for line in lines:
        record = process_line(kb, line)
        if echo:
            _echo(record)
        records.append(record)
    return records


def process_file(kb: KnowledgeBase, input_file: str, echo: bool = True) -> List[Dict[str, str]]:
    """Process every line of a notes file, see process_lines().

    Raises:
        ValueError: If the input file does not exist
    """
    input_path = Path(input_file)
    validate_file(input_path, "Input file")

    lines = input_path.read_text().splitlines()
    return process_lines(kb, lines, echo=echo)


def run_interactive(kb: KnowledgeBase, read_line: Optional[Callable[[str], str]] = None) -> List[Dict[str, str]]:
    """Read lines from the console until the user exits.

    The session ends on "exit" or "quit", end of input, or Ctrl-C.

    Args:
        kb: Knowledge base to update or query
        read_line: Function prompting for and returning one line, defaults to input()

    Returns:
        list: Transcript records of the lines entered
    """
    if read_line is None:
        read_line = input

    print("\n>> Interactive mode, type the next line:")

    records = []
    while True:
        try:
            line = read_line(CONSOLE_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.lower() in CONSOLE_EXIT_WORDS:
            break
        if not line:
            continue

        record = process_line(kb, line)
        _echo(record)
        records.append(record)

    return records


def save_transcript(records: List[Dict[str, str]], output_csv: str) -> str:
    """Write transcript records to a CSV file.

    Args:
        records: Records from process_lines(), process_file() or run_interactive()
        output_csv: Destination path, must end in .csv

    Returns:
        str: Path to the written CSV file

    Raises:
        ValueError: If the path is not a .csv file in an existing directory
    """
    output_path = Path(output_csv)
    validate_csv_output(output_path, "Transcript CSV")

    df = pd.DataFrame(records, columns=TRANSCRIPT_COLUMNS)
    df.to_csv(output_path, index=False)

    return str(output_path)


def summarize(records: List[Dict[str, str]]) -> Optional[str]:
    """One-line summary of a transcript, or None when it is empty."""
    if not records:
        return None

    df = pd.DataFrame(records, columns=TRANSCRIPT_COLUMNS)
    failed = (df["error"] != "").sum()
    questions = (df["kind"] == "question").sum()
    return (
        f"Processed {len(df)} lines: {questions} questions, "
        f"{len(df) - questions} definitions, {failed} errors"
    )
