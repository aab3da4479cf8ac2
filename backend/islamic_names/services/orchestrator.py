"""NameSuggestionOrchestrator: validates input and sequences generation then augmentation."""
from typing import TYPE_CHECKING, Optional, Union

from islamic_names.core.config import Settings
from islamic_names.core.errors import ValidationError
from islamic_names.core.logging import setup_logging
from islamic_names.models.names import (
    CandidateResult,
    ChatSession,
    Gender,
    NameSuggestion,
    PhotoInput,
)

if TYPE_CHECKING:
    from islamic_names.services.augmentation import MeaningAugmentationService
    from islamic_names.services.suggestion import NameSuggestionService

logger = setup_logging("orchestrator")

FATHER_NAME_MAX_LENGTH = 100


def validate_gender(value: Union[str, Gender, None]) -> Gender:
    """Return the Gender for ``value`` or raise ValidationError."""
    try:
        return Gender(value)
    except ValueError:
        raise ValidationError("gender must be one of: male, female") from None


def validate_father_name(value: Optional[str]) -> str:
    """Return the stripped father's name or raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("father's name is required")
    value = value.strip()
    if len(value) > FATHER_NAME_MAX_LENGTH:
        raise ValidationError(
            f"father's name must be at most {FATHER_NAME_MAX_LENGTH} characters"
        )
    return value


class NameSuggestionOrchestrator:
    """Runs one suggestion request end to end.

    Responsibilities:
    1. Validate caller input (fail fast with ValidationError)
    2. Ask NameSuggestionService for candidate names
    3. Skip augmentation when there are no candidates
    4. Ask MeaningAugmentationService for meaning/origin and return it verbatim

    Any failure in steps 2-4 is logged and turned into an empty list. There is
    no retry; the user asking again is the retry.
    """

    def __init__(
        self,
        suggestion_service: "NameSuggestionService",
        augmentation_service: "MeaningAugmentationService",
    ) -> None:
        self.suggestion_service = suggestion_service
        self.augmentation_service = augmentation_service

    async def generate_from_photo(
        self,
        photo_data_uri: str,
        gender: Union[str, Gender],
    ) -> list[NameSuggestion]:
        """Suggest names for the baby in the photo.

        Args:
            photo_data_uri: ``data:image/<type>;base64,<data>`` string.
            gender: ``"male"`` or ``"female"``.

        Returns:
            Augmented suggestions, or an empty list when the model found none
            or failed.

        Raises:
            ValidationError: Malformed gender or photo.
        """
        validated_gender = validate_gender(gender)
        photo = PhotoInput.from_data_uri(photo_data_uri)

        try:
            candidates = await self.suggestion_service.suggest_from_photo(
                photo, validated_gender
            )
            return await self._augment(candidates, pipeline="photo")
        except Exception as exc:
            logger.error(
                "Photo suggestion pipeline failed",
                exc_info=True,
                extra={"pipeline": "photo", "error_type": type(exc).__name__},
            )
            return []

    async def generate_from_chat(
        self,
        father_name: str,
        gender: Union[str, Gender],
        existing_names: Optional[list[str]] = None,
    ) -> list[NameSuggestion]:
        """Suggest 1-3 new names related to the father's name.

        ``existing_names`` is passed through unmodified (an empty list when
        None). Names the model repeats anyway are not filtered out.

        Raises:
            ValidationError: Malformed gender or missing father's name.
        """
        validated_gender = validate_gender(gender)
        validated_father_name = validate_father_name(father_name)
        exclusions = existing_names if existing_names is not None else []

        try:
            candidates = await self.suggestion_service.suggest_from_chat(
                validated_father_name, validated_gender, exclusions
            )
            return await self._augment(candidates, pipeline="chat")
        except Exception as exc:
            logger.error(
                "Chat suggestion pipeline failed",
                exc_info=True,
                extra={"pipeline": "chat", "error_type": type(exc).__name__},
            )
            return []

    async def continue_chat(self, session: ChatSession) -> ChatSession:
        """Fetch another round of suggestions and append them to ``session``."""
        new_suggestions = await self.generate_from_chat(
            session.father_name, session.gender, session.existing_names
        )
        if not new_suggestions:
            logger.info("No new names for chat session (seen=%d)", len(session.suggestions))
            return session
        return session.extend(new_suggestions)

    async def _augment(
        self, candidates: CandidateResult, pipeline: str
    ) -> list[NameSuggestion]:
        if candidates.is_empty:
            logger.info("No candidate names returned (%s)", pipeline)
            return []
        logger.info("candidates: pipeline=%s count=%d", pipeline, len(candidates.names))
        return await self.augmentation_service.augment(candidates.names)


def build_orchestrator(settings: Settings) -> NameSuggestionOrchestrator:
    """Wire the orchestrator and both services to a Gemini client for ``settings``.

    Raises:
        ConfigurationError: When ``settings`` has no way to reach the model.
    """
    from islamic_names.services.augmentation import MeaningAugmentationService
    from islamic_names.services.model_client import GeminiClient
    from islamic_names.services.suggestion import NameSuggestionService

    settings.check_credentials()
    model_client = GeminiClient(settings)
    return NameSuggestionOrchestrator(
        suggestion_service=NameSuggestionService(model_client),
        augmentation_service=MeaningAugmentationService(model_client),
    )
