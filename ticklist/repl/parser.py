"""
FILE: ticklist/repl/parser.py
PURPOSE: Parse user input into commands and arguments for REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
NOTES:
  - Handles quoted strings: add "entry with spaces"
  - Supports flags: --filter active, --json
  - Case-insensitive command names
  - Unbalanced quotes (e.g. "don't forget") fall back to whitespace split
  - Free-text commands (add, edit) read rest(), not args, so "--" inside
    entry text is not taken as a flag
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Union


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "ls", "toggle")
        args: Positional arguments (e.g., ["2", "new", "text"])
        flags: Flag arguments as dict (e.g., {"filter": "active"})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""

    def rest(self, skip: int = 0) -> str:
        """
        Raw text after the command word and `skip` more words.

        Spacing and "--" words are kept as typed. One pair of quotes
        around the whole text is removed.
        """
        text = self.raw_input
        for _ in range(skip + 1):
            parts = text.split(None, 1)
            text = parts[1] if len(parts) > 1 else ""

        if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
            text = text[1:-1]
        return text


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command="add", args=["Buy", "milk"], flags={})

        >>> parse_command('add "Buy milk"')
        ParseResult(command="add", args=["Buy milk"], flags={})

        >>> parse_command("ls --filter active")
        ParseResult(command="ls", args=[], flags={"filter": "active"})

    Notes:
        - Command is always the first token (lowercased)
        - "--name value" sets a value flag, a bare "--name" sets True
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    command = tokens[0].lower()

    args = []
    flags = {}
    i = 1

    while i < len(tokens):
        token = tokens[i]

        if token.startswith("--") and len(token) > 2:
            flag_name = token[2:]
            if i + 1 < len(tokens) and not tokens[i + 1].startswith("--"):
                flags[flag_name] = tokens[i + 1]
                i += 2
            else:
                flags[flag_name] = True
                i += 1
        else:
            args.append(token)
            i += 1

    return ParseResult(
        command=command,
        args=args,
        flags=flags,
        raw_input=input_str,
    )
