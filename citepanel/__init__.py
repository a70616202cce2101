"""CitePanel: split chat answers from their cited sources."""

from .citations import CitationMatcher, UncitedPolicy, compose_message, extract_citation_keys
from .config import RenderConfig, load_render_config
from .core import MessageRenderer
from .parsing import MessageSplitter, SourceParser, split_message
from .state import InteractionState
from .types import Feedback, Message, RenderedMessage, Role, SourceRecord

__all__ = [
    "MessageRenderer",
    "RenderConfig",
    "load_render_config",
    "MessageSplitter",
    "split_message",
    "SourceParser",
    "CitationMatcher",
    "UncitedPolicy",
    "extract_citation_keys",
    "compose_message",
    "InteractionState",
    "Feedback",
    "Message",
    "RenderedMessage",
    "Role",
    "SourceRecord",
]
