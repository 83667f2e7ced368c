"""Command-line interface for chatlib conversions over stdin/stdout."""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING, TextIO

from .config import config
from .errors import FormatError
from .training import transcript_to_training_data, turns_to_training_data
from .transcript import transcript_to_turns, turns_to_transcript

if TYPE_CHECKING:
    from collections.abc import Sequence
    from logging import Logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Build the CLI parser and read command-line arguments."""  # noqa: DOC201
    parser = argparse.ArgumentParser(
        description="Convert chats between JSON arrays, transcripts and training data.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        "to-transcript",
        help="Read a JSON array of messages and write the chat transcript.",
    )
    subparsers.add_parser(
        "to-turns",
        help="Read a chat transcript and write a JSON array of messages.",
    )
    training = subparsers.add_parser(
        "training-data",
        help="Write training pairs and the pending query as a JSON object.",
    )
    training.add_argument(
        "--from",
        dest="source",
        choices=("turns", "transcript"),
        default="turns",
        help="Input format on stdin (default: turns).",
    )
    return parser.parse_args(argv)


def read_turns(raw: str) -> list[str]:
    """Decode a JSON array of message strings.

    Returns:
        The decoded messages.

    Raises:
        ValueError: If ``raw`` is not valid JSON or not an array of strings.
    """
    turns = json.loads(raw)
    if not isinstance(turns, list) or not all(isinstance(t, str) for t in turns):
        msg = "Expected a JSON array of strings"
        raise ValueError(msg)  # noqa: TRY004
    return turns


def run_command(args: argparse.Namespace, raw: str) -> str:
    """Apply the selected conversion to the stdin text."""  # noqa: DOC201
    dump_kwargs = config.json_dump_kwargs()
    if args.command == "to-transcript":
        return turns_to_transcript(read_turns(raw))
    if args.command == "to-turns":
        return json.dumps(transcript_to_turns(raw), **dump_kwargs) + "\n"
    if args.source == "transcript":
        data = transcript_to_training_data(raw)
    else:
        data = turns_to_training_data(read_turns(raw))
    return json.dumps(data.to_dict(), **dump_kwargs) + "\n"


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Validate configuration and run one conversion."""  # noqa: DOC201
    args = parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    config.setup_logging()
    logger: Logger = config.get_logger(__name__)

    try:
        config.validate()
    except ValueError:
        logger.exception("Configuration invalid")
        return 1

    try:
        output = run_command(args, stdin.read())
    except FormatError as e:
        logger.error("Malformed transcript: %s", e)  # noqa: TRY400
        return 1
    except ValueError as e:
        logger.error("Invalid input: %s", e)  # noqa: TRY400
        return 1

    stdout.write(output)
    logger.debug("Finished %s", args.command)
    return 0

