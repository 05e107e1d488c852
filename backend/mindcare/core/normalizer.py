"""
Response Normalizer - turns the upstream's free-form completion text into the
application's structured result.

The model is asked for a JSON envelope but compliance is best-effort. Three
outcomes for a ``reply``:

* a JSON object with a non-empty ``response`` is used as-is, with a fallback
  analysis when ``emotional_analysis`` is absent;
* an empty reply, or a JSON object without ``response``, is a contract
  violation and raises ``InvalidUpstreamFormat``;
* anything that is not a JSON object is treated as the reply text itself.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .errors import InvalidUpstreamFormat
from .prompts import REPLY, SUMMARY

logger = logging.getLogger(__name__)

NO_EMOTIONAL_ANALYSIS = "No emotional analysis available."
UNANALYZABLE_FORMAT = "Unable to analyze emotions from this response format."
NO_SUMMARY = "No summary available."


@dataclass(frozen=True)
class ParsedReply:
    """Upstream text decoded to a JSON object."""
    payload: Dict[str, Any]


@dataclass(frozen=True)
class NotJson:
    """Upstream text that is not a JSON object."""
    raw_text: str


@dataclass(frozen=True)
class ReplyResult:
    response: str
    emotional_analysis: str

    kind = REPLY

    def to_dict(self) -> Dict[str, str]:
        return {"response": self.response, "emotional_analysis": self.emotional_analysis}


@dataclass(frozen=True)
class SummaryResult:
    summary: Optional[str]

    kind = SUMMARY

    @property
    def display_text(self) -> str:
        return self.summary or NO_SUMMARY

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"summary": self.summary}


CompletionResult = Union[ReplyResult, SummaryResult]


def parse_reply(raw_text: str) -> Union[ParsedReply, NotJson]:
    """Decode ``raw_text`` as a JSON object without raising."""
    try:
        payload = json.loads(raw_text.strip())
    except (ValueError, RecursionError):
        return NotJson(raw_text)
    if not isinstance(payload, dict):
        return NotJson(raw_text)
    return ParsedReply(payload)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def normalize_reply(raw_text: str) -> ReplyResult:
    if not raw_text or not raw_text.strip():
        logger.error("Upstream reply is empty")
        raise InvalidUpstreamFormat()

    parsed = parse_reply(raw_text)

    if isinstance(parsed, NotJson):
        logger.info(f"Upstream reply is not JSON, treating as plain text: {parsed.raw_text[:200]}")
        return ReplyResult(response=parsed.raw_text, emotional_analysis=UNANALYZABLE_FORMAT)

    response = parsed.payload.get("response")
    if not response:
        logger.error(f"Upstream reply missing 'response' field: {parsed.payload}")
        raise InvalidUpstreamFormat()

    analysis = parsed.payload.get("emotional_analysis")
    return ReplyResult(
        response=_as_text(response),
        emotional_analysis=_as_text(analysis) if analysis else NO_EMOTIONAL_ANALYSIS,
    )


def normalize_summary(raw_text: Optional[str]) -> SummaryResult:
    return SummaryResult(summary=raw_text or None)


def normalize(kind: str, raw_text: Optional[str]) -> CompletionResult:
    """
    Normalize upstream text for the given completion kind.

    Args:
        kind: "reply" or "summary"
        raw_text: Content of the upstream's first choice

    Returns:
        ReplyResult or SummaryResult

    Raises:
        InvalidUpstreamFormat: Reply is empty or its JSON lacks a non-empty ``response``
        ValueError: Unknown kind
    """
    if kind == SUMMARY:
        return normalize_summary(raw_text)
    if kind == REPLY:
        return normalize_reply(raw_text)
    raise ValueError(f"Unsupported completion kind: {kind}")
