"""Thin async wrapper around the google-genai client for structured JSON output."""
import time
from typing import Any, Optional

from google import genai
from google.genai import types

from islamic_names.core.config import Settings
from islamic_names.core.logging import setup_logging

logger = setup_logging("model_client")


class GeminiClient:
    """Calls Gemini with a declared response schema and returns the raw JSON text.

    The underlying ``genai.Client`` is created per call so that building the
    application never touches credentials.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def _build_client(self) -> genai.Client:
        if self.settings.use_vertexai:
            return genai.Client(
                vertexai=True,
                project=self.settings.gcp_project_id,
                location=self.settings.vertex_ai_location,
            )
        return genai.Client(api_key=self.settings.google_api_key)

    async def generate_json(
        self,
        contents: Any,
        response_schema: Any,
    ) -> Optional[str]:
        """Run one structured generation request.

        Args:
            contents: Prompt text, or a list of ``types.Part`` for multimodal input.
            response_schema: Pydantic model (or ``list[Model]``) the output must match.

        Returns:
            JSON text produced by the model, or None when the response carries no text.
        """
        client = self._build_client()
        _t0 = time.perf_counter()
        response = await client.aio.models.generate_content(
            model=self.settings.gemini_model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=response_schema,
            ),
        )
        logger.info(
            "Gemini call: %.2fs (model=%s)",
            time.perf_counter() - _t0,
            self.settings.gemini_model,
        )
        return response.text or None
