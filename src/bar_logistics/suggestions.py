"""Checklist suggestions from an external language model.

The service answers with text that should be a JSON array of checklist
lines. Anything else is treated as no suggestions.
"""

import json
import logging
import os
import re
from typing import Protocol

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from .models import ChecklistCategory, EventType, SuggestedItem

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


class SuggestionProvider(Protocol):
    """Anything that can propose a checklist for an event."""

    def generate_checklist(self, guest_count: int, event_type: EventType) -> str: ...


def build_checklist_prompt(guest_count: int, event_type: EventType) -> str:
    """Prompt asking for a checklist sized to the guest count."""
    categories = ", ".join(f"'{c.value}'" for c in ChecklistCategory)
    return f"""
Act as an experienced bar manager. Build a detailed checklist for a "{event_type.value}"
event with {guest_count} guests.

Return ONLY valid JSON: an array of objects, each shaped as
{{
  "name": "Item name",
  "category": one of exactly {categories},
  "quantity_needed": number (estimate for {guest_count} guests),
  "notes": "Short tip or specification"
}}

Include essentials such as:
- Beverage (vodka, whisky, gin, water, beer)
- Supply (ice, fruit, sugar)
- Glassware (highball glasses, wine glasses, shot glasses)
- Utensil (shakers, muddlers, napkins)
- Structure (mobile bar, bins)
"""


class OpenAISuggestionProvider:
    """Suggestion provider backed by an OpenAI-compatible chat endpoint."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: str | None = None,
        base_url: str | None = None,
        temperature: float = 0.4,
        client: OpenAI | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self.client = client or OpenAI(
            api_key=api_key or os.getenv("OPENAI_API_KEY"),
            base_url=base_url or None,
        )

    def generate_checklist(self, guest_count: int, event_type: EventType) -> str:
        """Ask the model for a checklist; returns ``"[]"`` on service errors."""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "user", "content": build_checklist_prompt(guest_count, event_type)}
                ],
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error("Checklist suggestion request failed: %s", e)
            return "[]"

        return strip_code_fences(response.choices[0].message.content or "")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences around a payload."""
    return _CODE_FENCE.sub("", text).strip()


def parse_suggestions(text: str | None) -> list[SuggestedItem]:
    """Parse a suggestion payload.

    Malformed JSON or anything other than an array yields an empty list.
    Array entries that do not describe a checklist line are skipped.
    """
    if not text:
        return []

    try:
        data = json.loads(strip_code_fences(text))
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning("Discarding unparseable suggestion payload: %s", e)
        return []

    if not isinstance(data, list):
        logger.warning("Discarding suggestion payload of type %s", type(data).__name__)
        return []

    suggestions = []
    for entry in data:
        try:
            suggestions.append(SuggestedItem.model_validate(entry))
        except ValidationError as e:
            logger.warning("Skipping malformed suggestion %r: %s", entry, e.errors()[0]["msg"])
    return suggestions


def request_suggestions(
    provider: SuggestionProvider, guest_count: int, event_type: EventType
) -> list[SuggestedItem]:
    """Fetch and parse suggestions for an event.

    Raises:
        ValueError: If guest_count is not positive
    """
    if guest_count <= 0:
        raise ValueError("Guest count must be positive to request suggestions")

    return parse_suggestions(provider.generate_checklist(guest_count, event_type))
