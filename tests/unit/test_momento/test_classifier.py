"""
Tests for Momento line classification.
"""

import pytest
from momento2dayone.momento.classifier import (
    classify_line,
    is_date_candidate,
    is_time_candidate,
    parse_place
)
from momento2dayone.momento.schemas import LineKind


class TestCandidates:
    """Test header length pre-filters."""

    def test_date_candidate_bounds(self):
        """Test date candidates are 10 to 17 characters long."""
        assert is_date_candidate("1 May 2002")
        assert is_date_candidate("30 September 2002")
        assert not is_date_candidate("1 May 202")
        assert not is_date_candidate("30 September 20021")

    def test_time_candidate_length(self):
        """Test time candidates are exactly 5 characters long."""
        assert is_time_candidate("13:45")
        assert not is_time_candidate("9:45")
        assert not is_time_candidate("13:45 ")


class TestHeaders:
    """Test date and time header recognition."""

    @pytest.mark.parametrize("line", [
        "13 August 2002",
        "1 May 2017",
        "30 September 2002",
        "32 NotAMonth 2002",
    ])
    def test_date_header(self, line):
        """Test lines shaped like a date are date headers."""
        classified = classify_line(line)
        assert classified.kind == LineKind.DATE_HEADER
        assert classified.value == line
        assert classified.is_header

    def test_time_header(self):
        """Test HH:MM is a time header."""
        classified = classify_line("13:45")
        assert classified.kind == LineKind.TIME_HEADER
        assert classified.value == "13:45"

    def test_date_length_but_not_pattern_is_body(self):
        """Test a date-sized line that is not a date falls through."""
        classified = classify_line("Hello, Day One!")
        assert classified.kind == LineKind.BODY
        assert classified.value == "Hello, Day One!"

    def test_date_inside_sentence_is_body(self):
        """Test a date must be the whole line."""
        assert classify_line("On 1 May 2002 we").kind == LineKind.BODY

    def test_time_length_but_not_pattern_is_body(self):
        """Test a five character line that is not a time falls through."""
        assert classify_line("Hello").kind == LineKind.BODY
        assert classify_line("12345").kind == LineKind.BODY

    def test_short_metadata_is_not_a_header(self):
        """Test a metadata line of header length keeps its prefix meaning."""
        classified = classify_line("At: 12 Road 2002")
        assert classified.kind == LineKind.PLACE
        assert classified.value == "12 Road 2002"


class TestMetadata:
    """Test metadata prefixes."""

    def test_place_with_address(self):
        """Test the address after the first colon is dropped."""
        classified = classify_line("At: Home: 1 Road Drive, Country (0.0, -0.0)")
        assert classified.kind == LineKind.PLACE
        assert classified.value == "Home"
        assert classified.is_metadata

    def test_place_without_colon(self):
        """Test the whole remainder is the place without a colon."""
        classified = classify_line("At: Work")
        assert classified.value == "Work"

        classified = classify_line("At: No SemiColon (52.50, -9.52)")
        assert classified.value == "No SemiColon (52.50, -9.52)"

    def test_parse_place(self):
        """Test place truncation helper."""
        assert parse_place("Cafe: Main Street: 3") == "Cafe"
        assert parse_place("Cafe") == "Cafe"

    def test_people(self):
        """Test people are split on comma and space."""
        classified = classify_line("With: Joe Bloggs, John Smith")
        assert classified.kind == LineKind.PEOPLE
        assert classified.value == ["Joe Bloggs", "John Smith"]

    def test_tags(self):
        """Test tags are split on comma and space."""
        classified = classify_line("Tags: Journaling, First Entry")
        assert classified.kind == LineKind.TAGS
        assert classified.value == ["Journaling", "First Entry"]

    def test_tags_separator_needs_space(self):
        """Test a comma without a space does not split."""
        classified = classify_line("Tags: a,b, c")
        assert classified.value == ["a,b", "c"]

    def test_media(self):
        """Test media keeps the file name as written."""
        classified = classify_line("Media: MEDIA_109.jpg")
        assert classified.kind == LineKind.MEDIA
        assert classified.value == "MEDIA_109.jpg"

    def test_prefix_is_case_sensitive(self):
        """Test prefixes must match exactly."""
        assert classify_line("at: Home").kind == LineKind.BODY
        assert classify_line("With:Joe").kind == LineKind.BODY
        assert classify_line("Tags:").kind == LineKind.BODY


class TestBody:
    """Test default classification."""

    def test_body_line(self):
        """Test ordinary text is body."""
        classified = classify_line("Went for a walk along the river.")
        assert classified.kind == LineKind.BODY
        assert not classified.is_header
        assert not classified.is_metadata

    def test_empty_line(self):
        """Test an empty line is body."""
        assert classify_line("").kind == LineKind.BODY

    def test_classification_is_repeatable(self):
        """Test classifying the same line twice gives the same result."""
        for line in ["13 August 2002", "13:45", "At: Home: x", "With: A, B", "text"]:
            assert classify_line(line) == classify_line(line)
