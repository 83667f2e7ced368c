"""chatlib - chat transcript conversion and training data extraction."""

from .errors import ChatlibError, FormatError, InvariantError
from .models import Role, TrainingData, TrainingPair
from .training import transcript_to_training_data, turns_to_training_data
from .transcript import fresh_token, transcript_to_turns, turns_to_transcript

__all__ = [
    "ChatlibError",
    "FormatError",
    "InvariantError",
    "Role",
    "TrainingData",
    "TrainingPair",
    "fresh_token",
    "transcript_to_training_data",
    "transcript_to_turns",
    "turns_to_training_data",
    "turns_to_transcript",
]
