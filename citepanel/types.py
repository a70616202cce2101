from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .data.validators import assert_required_fields


class Role(Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Feedback(Enum):
    UP = "up"
    DOWN = "down"


def coerce_role(value: Any) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown message role: {value!r}") from None


@dataclass(frozen=True)
class Message:
    role: Role
    content: str
    id: str

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Message":
        assert_required_fields(record, ["role", "content", "id"], allow_empty=["content"])
        return cls(
            role=coerce_role(record["role"]),
            content=str(record["content"]),
            id=str(record["id"]),
        )

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER


@dataclass(frozen=True)
class SourceRecord:
    """
    One piece of supporting evidence parsed from a message's source block.
    """

    id: str
    title: str
    detail_text: str = ""
    url: Optional[str] = None

    @property
    def has_details(self) -> bool:
        return bool(self.detail_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "detail_text": self.detail_text,
            "url": self.url,
        }


@dataclass
class RenderedMessage:
    """
    Structured output handed to the rendering layer.

    ``visible_sources`` is the cited subset of ``sources`` in block order.
    """

    message_id: str
    role: Role
    primary_answer: str
    visible_sources: List[SourceRecord] = field(default_factory=list)
    sources: List[SourceRecord] = field(default_factory=list)
    citation_keys: List[str] = field(default_factory=list)
    dangling_citations: List[str] = field(default_factory=list)

    @property
    def has_sources_panel(self) -> bool:
        return len(self.visible_sources) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message_id": self.message_id,
            "role": self.role.value,
            "primary_answer": self.primary_answer,
            "visible_sources": [source.to_dict() for source in self.visible_sources],
            "citation_keys": list(self.citation_keys),
            "dangling_citations": list(self.dangling_citations),
        }
