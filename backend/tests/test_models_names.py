"""Tests for name suggestion data models."""
import pytest
from pydantic import ValidationError as PydanticValidationError

from islamic_names.core.errors import ValidationError
from islamic_names.models.names import (
    CandidateResult,
    ChatSession,
    Gender,
    NameSuggestion,
    PhotoInput,
)


class TestGenderEnum:
    def test_values(self) -> None:
        assert Gender.male == "male"
        assert Gender.female == "female"
        assert len(Gender) == 2

    def test_rejects_other_values(self) -> None:
        with pytest.raises(ValueError):
            Gender("other")


class TestNameSuggestion:
    def test_strips_fields(self) -> None:
        s = NameSuggestion(name=" Yusuf ", meaning=" God increases ", origin=" Hebrew ")
        assert s.name == "Yusuf"
        assert s.meaning == "God increases"
        assert s.origin == "Hebrew"

    @pytest.mark.parametrize("field", ["name", "meaning", "origin"])
    def test_rejects_blank_field(self, field: str) -> None:
        data = {"name": "Maryam", "meaning": "Beloved", "origin": "Aramaic"}
        data[field] = "   "
        with pytest.raises(PydanticValidationError):
            NameSuggestion(**data)

    def test_rejects_missing_field(self) -> None:
        with pytest.raises(PydanticValidationError):
            NameSuggestion.model_validate({"name": "Maryam", "meaning": "Beloved"})

    def test_is_immutable(self) -> None:
        s = NameSuggestion(name="Maryam", meaning="Beloved", origin="Aramaic")
        with pytest.raises(PydanticValidationError):
            s.name = "Aisha"  # type: ignore[misc]


class TestCandidateResult:
    def test_success(self) -> None:
        result = CandidateResult.success(["Yusuf"])
        assert result.ok is True
        assert result.names == ["Yusuf"]
        assert result.is_empty is False

    def test_success_without_names_is_empty(self) -> None:
        assert CandidateResult.success([]).is_empty is True

    def test_failure_is_empty(self) -> None:
        result = CandidateResult.failure()
        assert result.ok is False
        assert result.names == []
        assert result.is_empty is True

    def test_failure_cannot_carry_names(self) -> None:
        with pytest.raises(PydanticValidationError):
            CandidateResult(ok=False, names=["Yusuf"])


class TestPhotoInput:
    def test_parses_data_uri(self) -> None:
        photo = PhotoInput.from_data_uri("data:image/jpeg;base64,AAA=")
        assert photo.mime_type == "image/jpeg"
        assert photo.data == "AAA="

    @pytest.mark.parametrize("payload", ["AA==", "AAA=", "AAAA", "AAAABB=="])
    def test_accepts_padded_payloads(self, payload: str) -> None:
        assert PhotoInput.from_data_uri(f"data:image/png;base64,{payload}").data == payload

    def test_drops_whitespace_in_payload(self) -> None:
        photo = PhotoInput.from_data_uri("data:image/png;base64,AAAA\nBB==\n")
        assert photo.data == "AAAABB=="

    def test_accepts_subtypes_with_symbols(self) -> None:
        photo = PhotoInput.from_data_uri("data:image/svg+xml;base64,PHN2Zz4=")
        assert photo.mime_type == "image/svg+xml"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            None,
            42,
            "not a data uri",
            "https://example.com/baby.jpg",
            "data:image/jpeg;base64,",
            "data:text/plain;base64,AAA=",
            "data:image/png,AAA=",
            "data:;base64,AAA=",
            "data:image/png;base64,   ",
            "data:image/png;base64,\n",
            "data:image/png;base64,A",
            "data:image/png;base64,AAAAA",
            "data:image/png;base64,A=AA",
            "data:image/png;base64,AAA=AAAA",
            "data:image/png;base64,AA===",
            "data:image/png;base64,AA-_",
        ],
    )
    def test_rejects_malformed(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PhotoInput.from_data_uri(value)
        assert str(exc_info.value).startswith("Invalid input: photo")


class TestChatSession:
    def _suggestion(self, name: str) -> NameSuggestion:
        return NameSuggestion(name=name, meaning="m", origin="Arabic")

    def test_starts_empty(self) -> None:
        session = ChatSession(father_name="Abdullah", gender=Gender.male)
        assert session.suggestions == []
        assert session.existing_names == []

    def test_existing_names_in_order(self) -> None:
        session = ChatSession(
            father_name="Abdullah",
            gender="female",
            suggestions=[self._suggestion("Amina"), self._suggestion("Asma")],
        )
        assert session.gender is Gender.female
        assert session.existing_names == ["Amina", "Asma"]

    def test_extend_appends_and_keeps_original(self) -> None:
        session = ChatSession(
            father_name="Abdullah",
            gender=Gender.male,
            suggestions=[self._suggestion("Ahmad")],
        )
        extended = session.extend([self._suggestion("Hamza")])
        assert extended.existing_names == ["Ahmad", "Hamza"]
        assert session.existing_names == ["Ahmad"]

    def test_rejects_unknown_gender(self) -> None:
        with pytest.raises(PydanticValidationError):
            ChatSession(father_name="Abdullah", gender="other")
