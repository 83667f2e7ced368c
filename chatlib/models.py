"""Data models for chat transcripts and training data."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

TrainingPair = tuple[str, str]


class Role(StrEnum):
    """The two participants of a chat, in speaking order."""

    HUMAN = "human"
    CHATBOT = "chatbot"

    @property
    def label(self) -> str:
        """Prefix that starts this role's record in a transcript."""
        return f"{self.value}: "

    def other(self) -> "Role":
        """Return the role that speaks after this one."""
        return Role.CHATBOT if self is Role.HUMAN else Role.HUMAN


@dataclass
class TrainingData:
    """Training examples derived from a chat, plus the pending human query.

    ``query`` is only set when the chat ends with an unanswered human message.
    """

    training_pairs: list[TrainingPair] = field(default_factory=list)
    query: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the training data as JSON-serializable primitives.

        Returns:
            dict[str, Any]: ``training_pairs`` as a list of two-item lists and
                ``query`` as a string or None.
        """
        return {
            "training_pairs": [list(pair) for pair in self.training_pairs],
            "query": self.query,
        }
