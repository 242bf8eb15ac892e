"""
Tests for projecting moments into Day One entries.
"""

from datetime import datetime, timezone

import pytest
from momento2dayone.dayone.projection import merge_tags, project, project_all
from momento2dayone.dayone.schemas import DayOneCompatible, DayOneEntry
from momento2dayone.momento.schemas import Moment


@pytest.fixture
def moment() -> Moment:
    """The reference moment."""
    return Moment(
        timestamp=datetime(2002, 8, 13, 13, 45, tzinfo=timezone.utc),
        body="Hello, Day One!",
        people=["Joe Bloggs", "John Smith"],
        places=["Home", "Work"],
        tags=["Journaling", "First Entry"],
        media=["/root/MEDIA_005.mp4", "/root/MEDIA_109.jpg", "/root/MEDIA_110.jpg"]
    )


class TestProject:
    """Test single moment projection."""

    def test_project(self, moment):
        """Test every projected field."""
        entry = project(moment)
        assert entry.iso_timestamp == "2002-08-13T13:45:00Z"
        assert entry.text == "Hello, Day One!"
        assert entry.merged_tags == [
            "Journaling", "First Entry", "Joe Bloggs", "John Smith", "Home", "Work"
        ]
        assert entry.media == moment.media

    def test_satisfies_protocol(self, moment):
        """Test the entry is usable wherever the importer expects one."""
        assert isinstance(project(moment), DayOneCompatible)

    def test_invalid_moment(self):
        """Test a moment without a timestamp cannot be projected."""
        with pytest.raises(ValueError):
            project(Moment(body="No time"))

    def test_empty_moment(self):
        """Test a moment with only a timestamp."""
        entry = project(Moment(timestamp=datetime(2017, 5, 1, 8, 0, tzinfo=timezone.utc)))
        assert entry.text == ""
        assert entry.merged_tags == []
        assert entry.filtered_media(".jpg") == []

    def test_projection_does_not_alias_moment(self, moment):
        """Test later changes to the moment do not leak into the entry."""
        entry = project(moment)
        moment.media.append("/root/late.jpg")
        assert "/root/late.jpg" not in entry.media


class TestMergeTags:
    """Test tag merging."""

    def test_duplicates_kept(self):
        """Test the same value in two categories is kept twice."""
        moment = Moment(tags=["Home"], people=["Ann"], places=["Home"])
        assert merge_tags(moment) == ["Home", "Ann", "Home"]


class TestFilteredMedia:
    """Test media filtering by extension."""

    def test_filter_jpg(self, moment):
        """Test only .jpg paths are returned, in order."""
        entry = project(moment)
        assert entry.filtered_media(".jpg") == ["/root/MEDIA_109.jpg", "/root/MEDIA_110.jpg"]

    def test_filter_other_extension(self, moment):
        """Test filtering by a different extension."""
        assert project(moment).filtered_media(".mp4") == ["/root/MEDIA_005.mp4"]
        assert project(moment).filtered_media(".png") == []

    def test_filter_is_suffix_match(self):
        """Test the extension must end the path."""
        entry = DayOneEntry(iso_timestamp="2002-08-13T13:45:00Z", media=["/a.jpg.mov", "/b.jpg"])
        assert entry.filtered_media(".jpg") == ["/b.jpg"]


class TestProjectAll:
    """Test batch projection."""

    def test_order_preserved(self):
        """Test output order follows input order."""
        moments = [
            Moment(timestamp=datetime(2002, 8, 13, hour, 0, tzinfo=timezone.utc), body=str(hour))
            for hour in (18, 9, 12)
        ]
        assert [entry.text for entry in project_all(moments)] == ["18", "9", "12"]
