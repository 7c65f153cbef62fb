"""
Raw message formatter: renders message-component trees to plain text.

Accepts a message dict, a list of messages, a ``{"rawtext": [...]}`` object
or the JSON text of any of those. ``score`` and ``selector`` components are
resolved through the selector evaluator; resolution failures render as an
empty string (or ``0`` for missing or unreadable scores) and host
exceptions are logged, never raised.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional, Union

from ..core.config import DEFAULT_SETTINGS, SelectorSettings
from ..core.exceptions import ResolutionError
from ..selector.executor import EntitySelector, ExecutionContext
from ..world.interface import ScoreboardIdentity

logger = logging.getLogger(__name__)

_FORMAT_CODE_RE = re.compile(r"§[0-9a-fk-or]")

RawInput = Union[dict, list, str, None]

MISSING_SCORE = "0"


class RawTextFormatter:
    """Formatter bound to one execution context."""

    def __init__(
        self,
        context: Optional[ExecutionContext] = None,
        settings: Optional[SelectorSettings] = None,
    ):
        self.context = context
        self.settings = settings or DEFAULT_SETTINGS

    def strip(self, text: str) -> str:
        if self.settings.strip_formatting:
            return _FORMAT_CODE_RE.sub("", text)
        return text

    def format(self, raw: RawInput) -> str:
        if raw is None or raw == "":
            return ""
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                return self.strip(raw)

        if isinstance(raw, list):
            return "".join(self._format_component(m) for m in raw)
        if isinstance(raw, dict):
            return self._format_component(raw)
        return self.strip(str(raw))

    def _format_component(self, message: Any) -> str:
        if isinstance(message, str):
            return self.strip(message)
        if not isinstance(message, dict):
            return ""

        result = ""
        if message.get("text"):
            result += self.strip(str(message["text"]))
        elif message.get("translate"):
            result += self._format_translate(message)
        elif isinstance(message.get("score"), dict):
            result += self._format_score(message["score"])
        elif message.get("selector"):
            result += self._format_selector(str(message["selector"]))

        nested = message.get("rawtext")
        if isinstance(nested, list):
            result += "".join(self._format_component(m) for m in nested)
        return result

    def _format_translate(self, message: dict) -> str:
        key = message["translate"]
        with_value = message.get("with")
        if not with_value:
            return f"[{key}]"
        if isinstance(with_value, list):
            rendered = ", ".join(
                v if isinstance(v, str) else self._format_component(v) for v in with_value
            )
        else:
            rendered = self._format_component(with_value)
        return f"[{key} with ({rendered})]"

    def _select(self, selector: str) -> list:
        if self.context is None:
            raise ResolutionError("No execution context for selector", target=selector)
        return EntitySelector(selector, self.settings).get_entities(self.context)

    def _format_selector(self, selector: str) -> str:
        try:
            return ", ".join(e.id for e in self._select(selector))
        except Exception as e:
            logger.warning("Error resolving selector %s: %s", selector, e)
            return ""

    def _find_participant(self, name: str) -> Optional[ScoreboardIdentity]:
        scoreboard = self.context.world.scoreboard
        for participant in scoreboard.get_participants():
            if participant.display_name == name:
                return participant
        return None

    def _format_score(self, score: dict) -> str:
        name = score.get("name")
        objective_name = score.get("objective")
        if not name or not objective_name:
            return ""
        if self.context is None or self.context.world.scoreboard is None:
            logger.warning("No scoreboard to resolve score of %s", name)
            return ""
        try:
            return self._resolve_score(str(name), str(objective_name))
        except Exception as e:
            logger.warning(
                "Error retrieving score for %s on %s: %s", name, objective_name, e
            )
            return MISSING_SCORE

    def _resolve_score(self, name: str, objective_name: str) -> str:
        objective = self.context.world.scoreboard.get_objective(objective_name)
        if objective is None:
            return MISSING_SCORE

        if name == "*":
            executor = self.context.executor
            identity = executor.scoreboard_identity if executor is not None else None
        elif name.startswith("@"):
            try:
                entities = self._select(name)
                identity = entities[0].scoreboard_identity if entities else None
            except Exception as e:
                logger.warning("Error resolving score holder %s: %s", name, e)
                return ""
            if identity is None:
                return ""
        else:
            identity = self._find_participant(name)

        if identity is None:
            return MISSING_SCORE
        value = objective.get_score(identity)
        return MISSING_SCORE if value is None else str(value)


def format_raw_message(
    raw: RawInput,
    context: Optional[ExecutionContext] = None,
    settings: Optional[SelectorSettings] = None,
) -> str:
    """Render a raw message tree to plain text."""
    return RawTextFormatter(context, settings).format(raw)
