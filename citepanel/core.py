import logging
from functools import lru_cache
from typing import List, Optional, Tuple, Union

from .citations.matcher import CitationMatcher
from .citations.citation import extract_citation_keys
from .config import RenderConfig
from .evaluation.metrics import CitationCoverage, EmptyPanelRate, ParseYield
from .parsing.source_parser import SourceParser
from .parsing.splitter import MessageSplitter
from .state.interaction import FeedbackCallback, InteractionState
from .types import Message, RenderedMessage, Role, SourceRecord, coerce_role
from .utils import setup_logging

_Analysis = Tuple[str, str, Tuple[SourceRecord, ...], int]


class MessageRenderer:
    """
    Turns chat messages into the structure the chat UI draws.

    Pipeline:
        content -> MessageSplitter -> SourceParser -> CitationMatcher -> RenderedMessage
    """

    def __init__(self, config: Optional[RenderConfig] = None, cache_size: int = 256) -> None:
        self.config = config or RenderConfig()
        setup_logging(package_level=self.config.log_level)
        self._logger = logging.getLogger(__name__)
        self._splitter = MessageSplitter(self.config.separator)
        self._parser = SourceParser(
            record_separator=self.config.record_separator,
            min_chunk_length=self.config.min_chunk_length,
            navigation_hint=self.config.navigation_hint,
        )
        self._matcher = CitationMatcher(self.config.uncited_policy)
        self._analyze = lru_cache(maxsize=cache_size)(self._analyze_content)

        self.coverage = CitationCoverage()
        self.parse_yield = ParseYield()
        self.empty_panel_rate = EmptyPanelRate()

    def render(self, message: Message) -> RenderedMessage:
        return self.render_content(message.content, role=message.role, message_id=message.id)

    def render_content(
        self,
        content: str,
        role: Union[Role, str] = Role.ASSISTANT,
        message_id: str = "",
    ) -> RenderedMessage:
        role = coerce_role(role)
        primary_answer, raw_block, sources, chunk_count = self._analyze(content or "")
        source_list: List[SourceRecord] = list(sources)

        citation_keys = extract_citation_keys(primary_answer)
        if role is Role.USER and self.config.assistant_only_sources:
            visible: List[SourceRecord] = []
        else:
            visible = self._matcher.filter_sources(citation_keys, source_list)

        dangling = self._matcher.dangling_keys(citation_keys, source_list)
        if dangling and source_list:
            self._logger.warning(
                "Message %s cites %s with no matching source", message_id or "<unknown>", dangling
            )

        rendered = RenderedMessage(
            message_id=message_id,
            role=role,
            primary_answer=primary_answer,
            visible_sources=visible,
            sources=source_list,
            citation_keys=sorted(citation_keys),
            dangling_citations=dangling,
        )
        self.coverage.update(rendered)
        self.parse_yield.update(len(source_list), chunk_count)
        self.empty_panel_rate.update(rendered, had_source_block=bool(raw_block.strip()))
        return rendered

    def new_interaction_state(
        self,
        message: Message,
        on_feedback: Optional[FeedbackCallback] = None,
        initial_feedback=None,
    ) -> InteractionState:
        return InteractionState(
            message_id=message.id,
            on_feedback=on_feedback,
            feedback=initial_feedback,
        )

    def clear_cache(self) -> None:
        self._analyze.cache_clear()

    def _analyze_content(self, content: str) -> _Analysis:
        primary_answer, raw_block = self._splitter.split(content)
        sources = tuple(self._parser.parse(raw_block))
        return primary_answer, raw_block, sources, self._parser.last_chunk_count
