"""Name suggestion data models."""
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from islamic_names.core.errors import ValidationError

_DATA_URI_RE = re.compile(
    r"data:(?P<mime_type>image/[A-Za-z0-9.+-]+);base64,(?P<data>.*)", re.DOTALL
)

# Whitespace removed; "=" only as trailing padding, length a multiple of 4.
_BASE64_RE = re.compile(
    r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})"
)
_WHITESPACE_RE = re.compile(r"\s+")


class Gender(str, Enum):
    """Baby gender accepted by both pipelines."""

    male = "male"
    female = "female"


class NameSuggestion(BaseModel):
    """A candidate name enriched with its meaning and origin."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The suggested name.")
    meaning: str = Field(..., description="The meaning of the name.")
    origin: str = Field(..., description="The origin of the name.")

    @field_validator("name", "meaning", "origin")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class NameCandidates(BaseModel):
    """Response schema of the name generation step."""

    names: list[str] = Field(..., description="Suggested Islamic names.")


class CandidateResult(BaseModel):
    """Tagged result of a name generation call.

    ``ok=False`` covers every case where the model answered with something
    unusable (no response, invalid JSON, wrong shape).
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    names: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _failure_has_no_names(self) -> "CandidateResult":
        if not self.ok and self.names:
            raise ValueError("a failed result cannot carry names")
        return self

    @classmethod
    def success(cls, names: list[str]) -> "CandidateResult":
        return cls(ok=True, names=names)

    @classmethod
    def failure(cls) -> "CandidateResult":
        return cls(ok=False)

    @property
    def is_empty(self) -> bool:
        return not self.ok or not self.names


class PhotoInput(BaseModel):
    """Base64 image payload split out of a data URI. Never decoded here."""

    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: str

    @classmethod
    def from_data_uri(cls, value: object) -> "PhotoInput":
        """Parse ``data:image/<subtype>;base64,<payload>``.

        The payload is checked for base64 shape only (alphabet, trailing
        padding, length a multiple of 4); whitespace inside it is dropped.

        Raises:
            ValidationError: When the value is not a string of that shape.
        """
        if not isinstance(value, str) or not value:
            raise ValidationError("photo must be a non-empty data URI")
        match = _DATA_URI_RE.fullmatch(value)
        if match is None:
            raise ValidationError(
                "photo must be a data URI of the form 'data:image/<type>;base64,<data>'"
            )
        data = _WHITESPACE_RE.sub("", match.group("data"))
        if not data:
            raise ValidationError("photo data must not be empty")
        if _BASE64_RE.fullmatch(data) is None:
            raise ValidationError("photo data must be valid base64")
        return cls(mime_type=match.group("mime_type"), data=data)


class ChatSession(BaseModel):
    """Client-held state of one chat. Only ever grows by appending suggestions."""

    father_name: str = Field(..., min_length=1, max_length=100)
    gender: Gender
    suggestions: list[NameSuggestion] = Field(default_factory=list)

    @property
    def existing_names(self) -> list[str]:
        return [s.name for s in self.suggestions]

    def extend(self, new_suggestions: list[NameSuggestion]) -> "ChatSession":
        """Return a copy of this session with ``new_suggestions`` appended."""
        return self.model_copy(
            update={"suggestions": [*self.suggestions, *new_suggestions]}
        )


class SuggestionsResponse(BaseModel):
    """Response body of the suggestion endpoints."""

    suggestions: list[NameSuggestion]


class PhotoSuggestionRequest(BaseModel):
    """Request body for suggestions from a baby photo.

    Fields stay loosely typed; the orchestration layer owns validation.
    """

    photo_data_uri: str
    gender: str


class ChatSuggestionRequest(BaseModel):
    """Request body for suggestions derived from the father's name."""

    father_name: str
    gender: str
    existing_names: Optional[list[str]] = None
