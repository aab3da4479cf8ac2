"""Name suggestion API router."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from islamic_names.core.errors import ValidationError
from islamic_names.models.names import (
    ChatSession,
    ChatSuggestionRequest,
    PhotoSuggestionRequest,
    SuggestionsResponse,
)
from islamic_names.services.orchestrator import NameSuggestionOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/names", tags=["names"])


def get_name_orchestrator(request: Request) -> NameSuggestionOrchestrator:
    """FastAPI dependency: retrieve NameSuggestionOrchestrator from app.state.

    Returns HTTP 503 if the orchestrator was not initialized at startup.
    """
    orchestrator: NameSuggestionOrchestrator | None = getattr(
        request.app.state, "name_orchestrator", None
    )
    if orchestrator is None:
        raise HTTPException(
            status_code=503,
            detail="Name suggestion service unavailable. Service not initialized.",
        )
    return orchestrator


def _invalid_input(exc: ValidationError) -> HTTPException:
    logger.info("Rejected request: %s", exc)
    return HTTPException(status_code=422, detail=str(exc))


@router.post("/photo", response_model=SuggestionsResponse)
async def get_ai_suggestions(
    body: PhotoSuggestionRequest,
    orchestrator: NameSuggestionOrchestrator = Depends(get_name_orchestrator),
) -> SuggestionsResponse:
    """Suggest names from a baby photo.

    An empty ``suggestions`` list means the model found nothing usable; the
    client should ask the user to try another photo.

    Raises:
        HTTPException 422: Malformed gender or photo data URI.
    """
    try:
        suggestions = await orchestrator.generate_from_photo(body.photo_data_uri, body.gender)
    except ValidationError as exc:
        raise _invalid_input(exc) from exc
    return SuggestionsResponse(suggestions=suggestions)


@router.post("/chat", response_model=SuggestionsResponse)
async def get_chat_response(
    body: ChatSuggestionRequest,
    orchestrator: NameSuggestionOrchestrator = Depends(get_name_orchestrator),
) -> SuggestionsResponse:
    """Suggest 1-3 names related to the father's name, avoiding ``existing_names``.

    Raises:
        HTTPException 422: Malformed gender or missing father's name.
    """
    try:
        suggestions = await orchestrator.generate_from_chat(
            body.father_name, body.gender, body.existing_names
        )
    except ValidationError as exc:
        raise _invalid_input(exc) from exc
    return SuggestionsResponse(suggestions=suggestions)


@router.post("/chat/more", response_model=ChatSession)
async def continue_chat(
    body: ChatSession,
    orchestrator: NameSuggestionOrchestrator = Depends(get_name_orchestrator),
) -> ChatSession:
    """Append another round of suggestions to a client-held chat session.

    The session comes back unchanged when no new names were found.
    """
    try:
        return await orchestrator.continue_chat(body)
    except ValidationError as exc:
        raise _invalid_input(exc) from exc
