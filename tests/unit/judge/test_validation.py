"""Tests for judge response validation.

Python justification: Required for pytest testing framework.
"""

import pytest

from llmscore.config.constants import DEFAULT_CONFIDENCE
from llmscore.core.errors import ResponseValidationError
from llmscore.judge.rubric import TONALITY_DIMENSIONS
from llmscore.judge.validation import (
    FieldKind,
    FieldSpec,
    parse_rubric_response,
    rubric_field_specs,
    validate_response,
)

SPECS = (
    FieldSpec("grade", FieldKind.GRADE),
    FieldSpec("note", FieldKind.STRING, required=False, default=""),
    FieldSpec("confidence", FieldKind.NUMBER, required=False, default=0.7),
    FieldSpec("quotes", FieldKind.STRING_LIST, required=False, default=[]),
)


class TestValidateResponse:
    """Tests for validate_response."""

    def test_valid_response(self) -> None:
        values = validate_response(
            {"grade": "B", "note": "ok", "confidence": 1, "quotes": ["x"]}, SPECS
        )
        assert values == {"grade": "B", "note": "ok", "confidence": 1.0, "quotes": ["x"]}
        assert isinstance(values["confidence"], float)

    @pytest.mark.parametrize("response", [None, "A", ["A"], 3])
    def test_non_mapping(self, response: object) -> None:
        with pytest.raises(ResponseValidationError) as exc_info:
            validate_response(response, SPECS)
        assert exc_info.value.field == "<root>"

    def test_missing_required(self) -> None:
        with pytest.raises(ResponseValidationError) as exc_info:
            validate_response({"note": "no grade"}, SPECS)
        assert exc_info.value.field == "grade"
        assert exc_info.value.reason == "missing required field"

    def test_null_required(self) -> None:
        with pytest.raises(ResponseValidationError, match="missing required field"):
            validate_response({"grade": None}, SPECS)

    @pytest.mark.parametrize("grade", ["F", "", "AB", 1])
    def test_malformed_grade(self, grade: object) -> None:
        with pytest.raises(ResponseValidationError) as exc_info:
            validate_response({"grade": grade}, SPECS)
        assert exc_info.value.field == "grade"

    def test_grade_normalized(self) -> None:
        assert validate_response({"grade": " b"}, SPECS)["grade"] == "B"

    def test_optional_defaults(self) -> None:
        values = validate_response({"grade": "A"}, SPECS)
        assert values["note"] == ""
        assert values["confidence"] == 0.7
        assert values["quotes"] == []

    def test_malformed_optional_falls_back(self) -> None:
        values = validate_response(
            {"grade": "A", "note": 5, "confidence": True, "quotes": ["ok", 3]}, SPECS
        )
        assert values["note"] == ""
        assert values["confidence"] == 0.7
        assert values["quotes"] == []

    def test_list_default_not_shared(self) -> None:
        first = validate_response({"grade": "A"}, SPECS)
        first["quotes"].append("mutated")
        second = validate_response({"grade": "A"}, SPECS)
        assert second["quotes"] == []

    def test_first_failure_in_declared_order(self) -> None:
        specs = (FieldSpec("first", FieldKind.GRADE), FieldSpec("second", FieldKind.GRADE))
        with pytest.raises(ResponseValidationError) as exc_info:
            validate_response({"second": "Z"}, specs)
        assert exc_info.value.field == "first"

    def test_extra_fields_ignored(self) -> None:
        values = validate_response({"grade": "C", "unrelated": {"nested": True}}, SPECS)
        assert "unrelated" not in values


class TestRubricFieldSpecs:
    """Tests for rubric_field_specs."""

    def test_grades_first(self) -> None:
        specs = rubric_field_specs(TONALITY_DIMENSIONS)
        assert [s.name for s in specs[:4]] == [
            "professionalism",
            "kindness",
            "clarity",
            "helpfulness",
        ]
        assert all(s.required for s in specs[:4])
        assert not any(s.required for s in specs[4:])
        assert len(specs) == 16

    def test_without_details(self) -> None:
        assert len(rubric_field_specs(TONALITY_DIMENSIONS, include_details=False)) == 4


class TestParseRubricResponse:
    """Tests for parse_rubric_response."""

    def test_full_response(self, all_a_response: dict) -> None:
        response = dict(all_a_response)
        response.update(
            {
                "clarity": "C",
                "clarity_confidence": 0.9,
                "clarity_explanation": "Rambling in places",
                "clarity_evidence": ["so basically, like"],
            }
        )
        judgment = parse_rubric_response(response, TONALITY_DIMENSIONS)

        assert judgment.grades() == ("A", "A", "C", "A")
        assert judgment.scores() == pytest.approx((1.0, 1.0, 0.5, 1.0))
        clarity = judgment.dimensions["clarity"]
        assert clarity.confidence == 0.9
        assert clarity.explanation == "Rambling in places"
        assert clarity.evidence == ["so basically, like"]
        assert judgment.raw_response is response

    def test_defaults_for_missing_details(self, all_a_response: dict) -> None:
        judgment = parse_rubric_response(all_a_response, TONALITY_DIMENSIONS)
        kindness = judgment.dimensions["kindness"]
        assert kindness.confidence == DEFAULT_CONFIDENCE
        assert kindness.explanation == ""
        assert kindness.evidence == []

    def test_confidence_clamped(self, all_a_response: dict) -> None:
        response = dict(all_a_response, kindness_confidence=4.2)
        judgment = parse_rubric_response(response, TONALITY_DIMENSIONS)
        assert judgment.dimensions["kindness"].confidence == 1.0

    def test_missing_dimension(self, all_a_response: dict) -> None:
        response = dict(all_a_response)
        del response["helpfulness"]
        with pytest.raises(ResponseValidationError) as exc_info:
            parse_rubric_response(response, TONALITY_DIMENSIONS)
        assert exc_info.value.field == "helpfulness"
