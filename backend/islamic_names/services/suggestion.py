"""Name suggestion service: asks the model for raw candidate names."""
import base64
import json
from typing import TYPE_CHECKING, Optional

from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from islamic_names.core.logging import setup_logging
from islamic_names.models.names import CandidateResult, Gender, NameCandidates, PhotoInput

if TYPE_CHECKING:
    from islamic_names.services.model_client import GeminiClient

logger = setup_logging("suggestion")


def _build_face_prompt(gender: Gender) -> str:
    """Build the instruction text that accompanies the baby photo."""
    return f"""You are an expert in suggesting Islamic names for newborns based on their facial features.

Given the photo of the baby and their gender, suggest a list of appropriate Islamic names.
Consider the cultural appropriateness and the meanings of the names.

Gender: {gender.value}

Return a JSON object with a 'names' array containing only the suggested names."""


def _build_chat_prompt(father_name: str, gender: Gender, existing_names: list[str]) -> str:
    """Build the chat prompt.

    The exclusion line is only added when there is something to exclude.
    """
    prompt = f"""You are an AI specializing in Islamic names. A user wants name suggestions for their baby.

The user has provided:
- Father's Name: {father_name}
- Baby's Gender: {gender.value}

Suggest 1 to 3 beautiful Islamic names for the baby. The names should be related to the father's name (similar meaning, variations, etc.).
"""
    if existing_names:
        prompt += (
            "Do not suggest the following names: "
            f"{json.dumps(existing_names, ensure_ascii=False)}.\n"
        )
    prompt += (
        "\nReturn a JSON object with a 'names' array. "
        "If you have no new suggestions, return an empty array."
    )
    return prompt


def _photo_part(photo: PhotoInput) -> types.Part:
    return types.Part(
        inline_data=types.Blob(data=base64.b64decode(photo.data), mime_type=photo.mime_type)
    )


def _parse_candidates(response_text: Optional[str]) -> CandidateResult:
    """Validate raw model output against ``NameCandidates``.

    Returns:
        ``CandidateResult.success`` with stripped, non-blank names, or
        ``CandidateResult.failure`` when the output is absent or malformed.
    """
    if not response_text:
        logger.warning("Model returned no candidate names")
        return CandidateResult.failure()
    try:
        parsed = NameCandidates.model_validate_json(response_text)
    except PydanticValidationError:
        logger.warning("Malformed candidate list from model: %.200s", response_text)
        return CandidateResult.failure()
    names = [name.strip() for name in parsed.names if name.strip()]
    return CandidateResult.success(names)


class NameSuggestionService:
    """Generates raw candidate names, from a photo or from the father's name."""

    def __init__(self, model_client: "GeminiClient") -> None:
        self.model_client = model_client

    async def suggest_from_photo(self, photo: PhotoInput, gender: Gender) -> CandidateResult:
        """Suggest names from the baby's face.

        Args:
            photo: Image payload taken from the caller's data URI.
            gender: Baby's gender.

        Returns:
            Tagged candidate list.
        """
        contents = [_photo_part(photo), types.Part(text=_build_face_prompt(gender))]
        response_text = await self.model_client.generate_json(
            contents=contents, response_schema=NameCandidates
        )
        return _parse_candidates(response_text)

    async def suggest_from_chat(
        self,
        father_name: str,
        gender: Gender,
        existing_names: list[str],
    ) -> CandidateResult:
        """Suggest 1-3 names related to the father's name.

        ``existing_names`` is forwarded to the model as an exclusion list. The
        model's compliance is not checked here.
        """
        response_text = await self.model_client.generate_json(
            contents=_build_chat_prompt(father_name, gender, existing_names),
            response_schema=NameCandidates,
        )
        return _parse_candidates(response_text)
