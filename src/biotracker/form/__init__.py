"""Entry form staging and save feedback."""
from .controller import EntryFormController
from .feedback import FeedbackState, SaveFeedback

__all__ = [
    "EntryFormController",
    "FeedbackState",
    "SaveFeedback",
]
