"""Unit tests for validators and validation utilities."""

import pytest

from lantern.utils.constants import EducationLevel, PersonalTrait, Subject
from lantern.utils.validators import (
    ValidationResult,
    clean_free_text,
    is_low_information_text,
    validate_education_willingness,
    validate_enum_set,
    validate_enum_value,
    validate_grade,
    validate_subject_ratings,
    validate_zip_code,
)
from tests.conftest import subject_ratings


class TestZipCodeValidation:
    """Test zip code validation."""

    def test_valid_zip_codes(self):
        for zip_code in ["30301", "00501", " 94105 "]:
            result = validate_zip_code(zip_code)
            assert result.is_valid, f"Failed for {zip_code}: {result.errors}"
            assert result.cleaned_value == zip_code.strip()

    def test_integer_zip_code_is_accepted(self):
        result = validate_zip_code(30301)
        assert result.is_valid
        assert result.cleaned_value == "30301"

    def test_invalid_zip_codes(self):
        for zip_code in ["3030", "303011", "3030a", "30301-1234"]:
            result = validate_zip_code(zip_code)
            assert not result.is_valid, f"Should fail for {zip_code}"
            assert "5 digits" in result.errors[0]

    def test_missing_zip_code(self):
        assert not validate_zip_code(None).is_valid
        assert not validate_zip_code("  ").is_valid


class TestGradeValidation:
    """Test grade validation."""

    @pytest.mark.parametrize("grade,expected", [(9, 9), (12, 12), ("10", 10), (" 11 ", 11)])
    def test_valid_grades(self, grade, expected):
        result = validate_grade(grade)
        assert result.is_valid
        assert result.cleaned_value == expected

    @pytest.mark.parametrize("grade", [8, 13, "7", "eleven", 10.5, True, None, "¹¹", "1½"])
    def test_invalid_grades(self, grade):
        assert not validate_grade(grade).is_valid


class TestSubjectRatingsValidation:
    """Test subject rating validation."""

    def test_complete_ratings(self):
        result = validate_subject_ratings(subject_ratings(math=5))

        assert result.is_valid
        assert set(result.cleaned_value) == set(Subject)
        assert result.cleaned_value[Subject.MATH] == 5

    def test_missing_subject_is_an_error(self):
        ratings = subject_ratings()
        del ratings["history"]

        result = validate_subject_ratings(ratings)

        assert not result.is_valid
        assert "subjectRatings.history is missing" in result.errors

    def test_out_of_range_and_non_integer(self):
        result = validate_subject_ratings(subject_ratings(math=6, art="x", science=True))

        assert not result.is_valid
        assert "subjectRatings.math must be between 1 and 5" in result.errors
        assert "subjectRatings.art must be an integer" in result.errors
        assert "subjectRatings.science must be an integer" in result.errors

    def test_numeric_strings_and_unknown_subjects(self):
        ratings = subject_ratings(math="4")
        ratings["astronomy"] = 5

        result = validate_subject_ratings(ratings)

        assert result.is_valid
        assert result.cleaned_value[Subject.MATH] == 4
        assert any("astronomy" in warning for warning in result.warnings)

    def test_superscript_digits_are_not_ratings(self):
        result = validate_subject_ratings(subject_ratings(math="²", art="³"))

        assert not result.is_valid
        assert "subjectRatings.math must be an integer" in result.errors
        assert "subjectRatings.art must be an integer" in result.errors

    def test_empty_ratings(self):
        assert validate_subject_ratings({}).errors == ["subjectRatings is required"]


class TestEnumValidation:
    """Test education level and enum tag validation."""

    def test_education_willingness(self):
        result = validate_education_willingness("Bachelor")
        assert result.is_valid
        assert result.cleaned_value == EducationLevel.BACHELOR

    def test_high_school_is_not_a_willingness_level(self):
        assert not validate_education_willingness("high_school").is_valid

    def test_enum_value(self):
        assert validate_enum_value("Analytical", PersonalTrait, "traits").cleaned_value == PersonalTrait.ANALYTICAL
        assert not validate_enum_value("grumpy", PersonalTrait, "traits").is_valid

    def test_enum_set(self):
        result = validate_enum_set(["analytical", "curious", "analytical"], PersonalTrait, "traits")
        assert result.cleaned_value == frozenset({PersonalTrait.ANALYTICAL, PersonalTrait.CURIOUS})

    def test_enum_set_collects_every_error(self):
        result = validate_enum_set(["grumpy", "curious", "sleepy"], PersonalTrait, "traits")
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_missing_enum_set_is_empty(self):
        assert validate_enum_set(None, PersonalTrait, "traits").cleaned_value == frozenset()


class TestFreeText:
    """Test free text helpers."""

    def test_clean_free_text(self):
        assert clean_free_text("  I like   cars \n and trucks ") == "I like cars and trucks"
        assert clean_free_text(None) == ""

    @pytest.mark.parametrize("text", ["", "idk", "None.", "not sure", "cars", "I dunno"])
    def test_low_information(self, text):
        assert is_low_information_text(text)

    def test_informative_text(self):
        assert not is_low_information_text("I like fixing old bikes")


class TestValidationResult:
    """Test ValidationResult helpers."""

    def test_add_error_marks_invalid(self):
        result = ValidationResult.success("value")
        result.add_error("broken")
        assert not result.is_valid
        assert result.errors == ["broken"]

    def test_failure_from_string(self):
        assert ValidationResult.failure("bad").errors == ["bad"]
