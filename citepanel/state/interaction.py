from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional, Union

from ..types import Feedback

FeedbackCallback = Callable[[str, str], None]

logger = logging.getLogger(__name__)


def toggle_expanded(expanded: Mapping[str, bool], source_id: str) -> Dict[str, bool]:
    """Return a copy of ``expanded`` with ``source_id`` flipped (default collapsed)."""
    updated = dict(expanded)
    updated[source_id] = not expanded.get(source_id, False)
    return updated


def next_feedback(current: Optional[Feedback], value: Feedback) -> Optional[Feedback]:
    """Selecting the feedback already held clears it."""
    return None if current is value else value


def coerce_feedback(value: Union[Feedback, str]) -> Feedback:
    if isinstance(value, Feedback):
        return value
    try:
        return Feedback(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Feedback must be 'up' or 'down', got {value!r}") from None


@dataclass
class InteractionState:
    """
    Per-message UI state: expanded source panels and thumbs feedback.

    ``on_feedback`` is called with ``(message_id, "up"|"down")`` whenever a
    feedback value is set; clearing it does not notify.
    """

    message_id: str
    on_feedback: Optional[FeedbackCallback] = None
    feedback: Optional[Feedback] = None
    expanded: Dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.feedback is not None:
            self.feedback = coerce_feedback(self.feedback)

    def is_expanded(self, source_id: str) -> bool:
        return self.expanded.get(source_id, False)

    def toggle_expanded(self, source_id: str) -> bool:
        self.expanded = toggle_expanded(self.expanded, source_id)
        return self.expanded[source_id]

    def set_feedback(self, value: Union[Feedback, str]) -> Optional[Feedback]:
        self.feedback = next_feedback(self.feedback, coerce_feedback(value))
        if self.feedback is not None and self.on_feedback is not None:
            logger.debug("Feedback %s for message %s", self.feedback.value, self.message_id)
            self.on_feedback(self.message_id, self.feedback.value)
        return self.feedback
