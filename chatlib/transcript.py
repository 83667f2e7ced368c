"""Conversion between chat arrays and chat transcripts.

A chat array is an ordered sequence of messages: index 0 is the human, index 1
is the chatbot's reply, and so on. If the human sent several messages before
the chatbot answered, they must be combined into a single element.

A chat transcript is the string form of a chat array. Each message starts on a
new line prefixed with ``"human: "`` or ``"chatbot: "``. There is no escape
sequence for these prefixes, so a message that contains one of them will not
survive a round trip. Leading and trailing whitespace of every message is
ignored.
"""

from collections.abc import Sequence

from .config import config
from .errors import FormatError, InvariantError
from .models import Role

logger = config.get_logger(__name__)


def format_message(role: Role, message: str) -> str:
    """Render one transcript record for ``message`` spoken by ``role``."""
    return f"{role.label}{message.strip()}\n"


def turns_to_transcript(turns: Sequence[str]) -> str:
    """Convert a chat array into a chat transcript.

    Args:
        turns: Messages in speaking order, starting with the human.

    Returns:
        The transcript, one labelled record per message, each ending in a
        newline. An empty chat array gives an empty string.
    """
    transcript = ""
    role = Role.HUMAN
    for message in turns:
        transcript += format_message(role, message)
        role = role.other()
    logger.debug("Converted %d messages into a transcript", len(turns))
    return transcript


def transcript_to_turns(transcript: str) -> list[str]:
    """Convert a chat transcript back into a chat array.

    Only the leading label is checked. Every later ``"human: "`` or
    ``"chatbot: "`` marks the start of the next message, and roles are
    re-derived from position, so labels that do not alternate are not
    detected.

    Args:
        transcript: Transcript produced by :func:`turns_to_transcript`.

    Returns:
        The messages in order, each stripped of surrounding whitespace.

    Raises:
        FormatError: If a non-blank transcript does not start with
            ``"human: "``.
    """
    if not transcript.strip():
        return []
    text = transcript.lstrip()
    if not text.startswith(Role.HUMAN.label):
        msg = (
            f"Transcript must start with {Role.HUMAN.label!r}, "
            f"got {text[: len(Role.HUMAN.label)]!r}"
        )
        raise FormatError(msg)

    # Labels contain no digits, so the token is also absent from the body.
    token = fresh_token(text)
    # Drop the first label, otherwise splitting yields a leading empty field.
    text = text[len(Role.HUMAN.label) :]
    for role in Role:
        text = text.replace(role.label, token)
    turns = [field.strip() for field in text.split(token)]
    logger.debug("Parsed transcript into %d messages", len(turns))
    return turns


def fresh_token(text: str) -> str:
    """Find a delimiter that does not occur anywhere in ``text``.

    Args:
        text: Non-empty text that the delimiter must not collide with.

    Returns:
        The decimal form of the smallest non-negative integer that is not a
        substring of ``text``.

    Raises:
        InvariantError: If ``text`` is empty.
    """
    if not text:
        msg = "fresh_token requires non-empty text"
        raise InvariantError(msg)

    candidate = 0
    while str(candidate) in text:
        candidate += 1
    return str(candidate)
