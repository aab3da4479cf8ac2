"""Meaning augmentation service: attaches meaning and origin to candidate names."""
import json
import re
import unicodedata
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

from pydantic import ValidationError as PydanticValidationError

from islamic_names.core.logging import setup_logging
from islamic_names.models.names import NameSuggestion

if TYPE_CHECKING:
    from islamic_names.services.model_client import GeminiClient

logger = setup_logging("augmentation")

_PAREN_SUFFIX_RE = re.compile(r"\s*[(\[].*$", re.DOTALL)


def _build_prompt(names: Sequence[str]) -> str:
    return (
        "For each name in the following list, provide its meaning and origin. "
        "Return a JSON array where each object contains the name, meaning, and origin.\n\n"
        f"Names: {json.dumps(list(names), ensure_ascii=False)}"
    )


def _name_key(name: str) -> str:
    """Comparison key: no parenthesized suffix, no diacritics, casefolded.

    ``"Yūsuf"`` and ``"Yusuf (يوسف)"`` both become ``"yusuf"``.
    """
    name = _PAREN_SUFFIX_RE.sub("", name)
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.split()).casefold()


def _parse_items(response_text: Optional[str]) -> list[NameSuggestion]:
    """Decode the model output, keeping only fully populated entries."""
    if not response_text:
        logger.warning("Model returned no augmentation output")
        return []
    try:
        data: Any = json.loads(response_text)
    except json.JSONDecodeError:
        logger.warning("Augmentation output is not JSON: %.200s", response_text)
        return []
    if not isinstance(data, list):
        logger.warning("Augmentation output is not a list: %.200s", response_text)
        return []

    suggestions: list[NameSuggestion] = []
    for item in data:
        try:
            suggestions.append(NameSuggestion.model_validate(item))
        except PydanticValidationError:
            logger.warning("Dropping incomplete augmentation entry: %.200r", item)
    return suggestions


def _order_like(names: Sequence[str], suggestions: list[NameSuggestion]) -> list[NameSuggestion]:
    """Reorder ``suggestions`` to follow ``names``.

    Entries are matched by ``_name_key``, each used at most once, and carry
    the requested spelling in ``name``. When the names left unmatched and
    the entries left unused are equal in number, they are paired up by
    position. Otherwise names the model did not describe are left out.
    """
    by_name: dict[str, list[int]] = {}
    for index, suggestion in enumerate(suggestions):
        by_name.setdefault(_name_key(suggestion.name), []).append(index)

    matched: list[Optional[int]] = []
    for name in names:
        indexes = by_name.get(_name_key(name))
        matched.append(indexes.pop(0) if indexes else None)

    used = {index for index in matched if index is not None}
    unused = [index for index in range(len(suggestions)) if index not in used]
    unmatched = [pos for pos, index in enumerate(matched) if index is None]
    if unmatched and len(unmatched) == len(unused):
        logger.info("Matching %d augmentation entries by position", len(unused))
        for pos, index in zip(unmatched, unused):
            matched[pos] = index

    ordered: list[NameSuggestion] = []
    for name, index in zip(names, matched):
        if index is None:
            logger.warning("No meaning returned for name %r", name)
            continue
        ordered.append(suggestions[index].model_copy(update={"name": name}))
    return ordered


class MeaningAugmentationService:
    """Enriches candidate names with meaning and origin via the model."""

    def __init__(self, model_client: "GeminiClient") -> None:
        self.model_client = model_client

    async def augment(self, names: Sequence[str]) -> list[NameSuggestion]:
        """Return one NameSuggestion per input name, in input order.

        An empty input returns immediately without calling the model. Malformed
        output yields fewer results (possibly none) instead of an error.
        """
        if not names:
            return []

        response_text = await self.model_client.generate_json(
            contents=_build_prompt(names),
            response_schema=list[NameSuggestion],
        )
        return _order_like(names, _parse_items(response_text))
