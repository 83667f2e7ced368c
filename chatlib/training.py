"""Turn chats into training examples for a response model."""

from collections.abc import Sequence

from .config import config
from .models import Role, TrainingData
from .transcript import format_message, transcript_to_turns

logger = config.get_logger(__name__)


def turns_to_training_data(turns: Sequence[str]) -> TrainingData:
    """Build training examples from a chat array.

    Every chatbot message that follows at least one earlier message becomes a
    training pair of (transcript so far, chatbot message). If the chat ends
    with a human message, that message is not part of any pair; instead the
    full transcript up to and including it is returned as the query whose
    response is to be predicted.

    Args:
        turns: Messages in speaking order, starting with the human.

    Returns:
        TrainingData: The training pairs in chat order and the optional query.
    """
    data = TrainingData()
    transcript = ""
    role = Role.HUMAN
    last_index = len(turns) - 1
    for index, message in enumerate(turns):
        if transcript and role is Role.CHATBOT:
            # The transcript so far ends with the human message being answered.
            data.training_pairs.append((transcript.strip(), message.strip()))
        transcript += format_message(role, message)
        if role is Role.HUMAN and index == last_index:
            data.query = transcript.strip()
        role = role.other()

    logger.debug(
        "Built %d training pairs from %d messages (query: %s)",
        len(data.training_pairs),
        len(turns),
        "yes" if data.query is not None else "no",
    )
    return data


def transcript_to_training_data(transcript: str) -> TrainingData:
    """Build training examples from a chat transcript.

    Returns:
        TrainingData: Same as :func:`turns_to_training_data` on the parsed
            transcript.

    Raises:
        FormatError: If the transcript does not start with ``"human: "``.
    """
    return turns_to_training_data(transcript_to_turns(transcript))
