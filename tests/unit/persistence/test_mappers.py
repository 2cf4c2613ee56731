"""Tests for row and domain model mapping."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from study.domain.model import Topic
from study.domain.service.topic_projection import filter_by_category
from study.domain.value import TopicCategory, TopicStatus
from study.persistence.mappers import row_to_topic, topic_changes_to_dict

CREATED = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _row(**overrides):
    row = {
        "id": str(uuid4()),
        "title": "Legacy topic",
        "description": None,
        "category": "Vibe Coding",
        "tags": ["python"],
        "status": "In Progress",
        "created_by": str(uuid4()),
        "created_at": CREATED,
        "updated_at": CREATED,
        "username": "ada",
    }
    row.update(overrides)
    return row


class TestRowToTopic:
    """Closed enums resolve unknown stored values to their fallbacks."""

    def test_known_values_are_kept(self):
        topic = row_to_topic(_row())

        assert topic.category == TopicCategory.VIBE_CODING
        assert topic.status == TopicStatus.IN_PROGRESS
        assert topic.tags == ["python"]
        assert topic.author_username == "ada"

    @pytest.mark.parametrize("category", ["Physics", None, ""])
    def test_unknown_category_is_uncategorized(self, category):
        assert row_to_topic(_row(category=category)).category == (
            TopicCategory.UNCATEGORIZED
        )

    @pytest.mark.parametrize("status", ["Blocked", None])
    def test_unknown_status_is_not_started(self, status):
        assert row_to_topic(_row(status=status)).status == TopicStatus.NOT_STARTED

    def test_null_tags_are_empty(self):
        assert row_to_topic(_row(tags=None)).tags == []

    def test_fallback_topics_leave_category_filters(self):
        """An unknown category only shows under "All"."""
        # Arrange
        legacy = row_to_topic(_row(category="Physics"))
        known = row_to_topic(_row(category="Game Engine"))

        # Act
        filtered = filter_by_category([legacy, known], TopicCategory.GAME_ENGINE)
        everything = filter_by_category([legacy, known], None)

        # Assert
        assert filtered == [known]
        assert everything == [legacy, known]


class TestTopicModelValidate:
    """The model itself applies the same fallbacks."""

    def test_validate_with_unknown_values(self):
        topic = Topic.model_validate(
            {
                "id": uuid4(),
                "title": "Imported",
                "category": "Chemistry",
                "status": "Archived",
                "tags": None,
                "created_by": uuid4(),
            }
        )

        assert topic.category == TopicCategory.UNCATEGORIZED
        assert topic.status == TopicStatus.NOT_STARTED
        assert topic.tags == []


class TestTopicChangesToDict:
    """Partial updates name only the changed columns."""

    def test_status_change_names_status_only(self):
        assert topic_changes_to_dict({"status": TopicStatus.DONE}) == {
            "status": "Done"
        }

    def test_enums_and_plain_values(self):
        changes = topic_changes_to_dict(
            {"title": "New", "category": TopicCategory.MODELING_3D}
        )

        assert changes == {"title": "New", "category": "3D Modeling"}
