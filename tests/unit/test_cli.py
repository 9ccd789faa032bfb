"""
Tests for the command line entry point and session configuration

Checks:
1. Loading and validating the JSON session config
2. Command line arguments override the config file
3. End-to-end runs through main()
"""

import json

import pandas as pd
import pytest
from pydantic import ValidationError

from merchant_guide.__main__ import build_parser, main, resolve_config
from merchant_guide.common.config import SessionConfig, load_session_config

NOTES = """glob is I
prok is V
glob glob Silver is 34 Credits
how many Credits is glob prok Silver ?
how much is prok prok prok prok ?
"""


@pytest.fixture
def notes_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text(NOTES)
    return path


class TestSessionConfig:

    def test_defaults(self) -> None:
        config = SessionConfig()
        assert config.input_file is None
        assert config.output_csv is None
        assert config.interactive is False
        assert config.definitions == []

    def test_load(self, tmp_path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"input_file": "notes.txt", "definitions": ["glob is I"]}))
        config = load_session_config(str(path))
        assert config.input_file == "notes.txt"
        assert config.definitions == ["glob is I"]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_session_config(str(tmp_path / "missing.json"))

    def test_invalid_content(self, tmp_path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"interactive": "sometimes"}))
        with pytest.raises(ValidationError):
            load_session_config(str(path))

    def test_command_line_wins(self, tmp_path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"input_file": "a.txt", "output_csv": "a.csv"}))
        args = build_parser().parse_args(["b.txt", "-c", str(path)])
        config = resolve_config(args)
        assert config.input_file == "b.txt"
        assert config.output_csv == "a.csv"


class TestMain:

    def test_input_file(self, notes_file, capsys) -> None:
        assert main([str(notes_file)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "glob prok Silver is 68 Credits",
            "Error: Invalid Roman numeral: 'VVVV'",
        ]

    def test_transcript(self, notes_file, tmp_path, capsys) -> None:
        output = tmp_path / "transcript.csv"
        assert main([str(notes_file), "-o", str(output)]) == 0
        out = capsys.readouterr().out
        assert "Transcript saved to" in out
        assert "Processed 5 lines: 2 questions, 3 definitions, 1 errors" in out

        df = pd.read_csv(output, keep_default_na=False)
        assert df["result"].tolist()[3] == "glob prok Silver is 68 Credits"

    def test_config_definitions(self, tmp_path, capsys) -> None:
        notes = tmp_path / "questions.txt"
        notes.write_text("how much is pish glob ?\n")
        config = tmp_path / "session.json"
        config.write_text(json.dumps({
            "input_file": str(notes),
            "definitions": ["glob is I", "pish is X"],
        }))
        assert main(["-c", str(config)]) == 0
        assert capsys.readouterr().out.splitlines() == ["pish glob is 11"]

    def test_invalid_config_definition(self, tmp_path, notes_file, capsys) -> None:
        config = tmp_path / "session.json"
        config.write_text(json.dumps({"definitions": ["glob is Q"]}))
        assert main([str(notes_file), "-c", str(config)]) == 1
        assert "Error in config definitions" in capsys.readouterr().out

    def test_nothing_to_do(self, capsys) -> None:
        assert main([]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_input_file(self, tmp_path, capsys) -> None:
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Input file not found" in capsys.readouterr().out

    def test_bad_output_path(self, notes_file, tmp_path, capsys) -> None:
        assert main([str(notes_file), "-o", str(tmp_path / "transcript.json")]) == 1
        assert "not a CSV file" in capsys.readouterr().out

    def test_interactive(self, notes_file, monkeypatch, capsys) -> None:
        answers = iter(["how much is glob glob ?", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert main([str(notes_file), "--interactive"]) == 0
        assert "glob glob is 2" in capsys.readouterr().out
