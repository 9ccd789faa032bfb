"""Main entry point for the merchant guide package."""
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .common.config import SessionConfig, load_session_config
from .common.errors import MerchantGuideError
from .common.validators import validate_csv_output
from .knowledge_base import KnowledgeBase
from .run_session import (
    process_file,
    run_interactive,
    save_transcript,
    summarize,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Merchant guide: learn alien numerals and material prices, then answer questions'
    )
    parser.add_argument('input_file', nargs='?', help='Notes file with definitions and questions, one per line')
    parser.add_argument('-i', '--interactive', action='store_true', help='Read further lines from the console')
    parser.add_argument('-o', '--output', help='Save a transcript of the session to this CSV file')
    parser.add_argument('-c', '--config', help='Path to session configuration JSON file')
    return parser


def resolve_config(args: argparse.Namespace) -> SessionConfig:
    """Merge the optional config file with command line arguments.

    Command line values win over values from the config file.
    """
    config = load_session_config(args.config) if args.config else SessionConfig()

    updates = {}
    if args.input_file:
        updates['input_file'] = args.input_file
    if args.output:
        updates['output_csv'] = args.output
    if args.interactive:
        updates['interactive'] = True
    return config.model_copy(update=updates)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one merchant guide session."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValidationError) as e:
        print(f"Error loading config: {e}")
        return 1

    if not config.input_file and not config.interactive:
        parser.print_usage()
        print("Error: give an input file, --interactive, or a config file that sets one of them")
        return 1

    # Fail before processing anything if the transcript cannot be written
    if config.output_csv:
        try:
            validate_csv_output(Path(config.output_csv), "Transcript CSV")
        except ValueError as e:
            print(e)
            return 1

    kb = KnowledgeBase()
    records = []

    # Prelude definitions from the config must all be valid
    try:
        for definition in config.definitions:
            kb.define(definition)
    except MerchantGuideError as e:
        print(f"Error in config definitions: {e}")
        return 1

    # Echo answers unless they only go to the transcript
    echo = config.output_csv is None or config.interactive

    if config.input_file:
        try:
            records.extend(process_file(kb, config.input_file, echo=echo))
        except ValueError as e:
            print(e)
            return 1

    if config.interactive:
        records.extend(run_interactive(kb))

    if config.output_csv:
        try:
            output_file = save_transcript(records, config.output_csv)
        except ValueError as e:
            print(e)
            return 1
        print(f"Transcript saved to: {output_file}")
        summary = summarize(records)
        if summary:
            print(summary)

    return 0


if __name__ == "__main__":
    sys.exit(main())
