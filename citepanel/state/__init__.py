from .interaction import (
    FeedbackCallback,
    InteractionState,
    coerce_feedback,
    next_feedback,
    toggle_expanded,
)

__all__ = [
    "FeedbackCallback",
    "InteractionState",
    "coerce_feedback",
    "next_feedback",
    "toggle_expanded",
]
