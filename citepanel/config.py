from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .citations.citation import UncitedPolicy
from .parsing.source_parser import MIN_CHUNK_LENGTH, NAVIGATION_HINT, RECORD_SEPARATOR
from .parsing.splitter import RELATED_DOCUMENTS_SEPARATOR

ENV_PREFIX = "CITEPANEL_"
TRUTHY = ("1", "true", "yes")


@dataclass
class RenderConfig:
    separator: str = RELATED_DOCUMENTS_SEPARATOR
    record_separator: str = RECORD_SEPARATOR
    min_chunk_length: int = MIN_CHUNK_LENGTH
    navigation_hint: str = NAVIGATION_HINT
    uncited_policy: UncitedPolicy = UncitedPolicy.HIDE
    assistant_only_sources: bool = True
    log_level: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.uncited_policy = _coerce_policy(self.uncited_policy)
        self.min_chunk_length = int(self.min_chunk_length)
        if self.min_chunk_length < 0:
            raise ValueError("min_chunk_length must be >= 0.")

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RenderConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)} - {"extra"}
        return cls(
            **{k: v for k, v in data.items() if k in known},
            extra={k: v for k, v in data.items() if k not in known},
        )

    @classmethod
    def from_env(cls, base: Optional["RenderConfig"] = None) -> "RenderConfig":
        """
        Apply CITEPANEL_* environment overrides on top of ``base``.
        """
        config = base or cls()
        overrides: Dict[str, Any] = {}

        policy = os.getenv(f"{ENV_PREFIX}UNCITED_POLICY")
        if policy:
            overrides["uncited_policy"] = policy
        min_length = os.getenv(f"{ENV_PREFIX}MIN_CHUNK_LENGTH")
        if min_length:
            overrides["min_chunk_length"] = int(min_length)
        assistant_only = os.getenv(f"{ENV_PREFIX}ASSISTANT_ONLY_SOURCES")
        if assistant_only:
            overrides["assistant_only_sources"] = assistant_only.lower() in TRUTHY
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level

        return replace(config, **overrides) if overrides else config


def load_render_config(path: str | Path) -> RenderConfig:
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Render config must be a mapping, got {type(data).__name__}.")
    return RenderConfig.from_mapping(data)


def _coerce_policy(value: Any) -> UncitedPolicy:
    if isinstance(value, UncitedPolicy):
        return value
    try:
        return UncitedPolicy(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(policy.value for policy in UncitedPolicy)
        raise ValueError(f"Unknown uncited_policy {value!r} (expected one of: {valid}).") from None
