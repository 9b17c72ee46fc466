# SPDX-License-Identifier: MIT

import pytest

from weekline.exceptions import MissingFieldsError
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.service import category as category_service
from weekline.service import timeline as timeline_service
from weekline.service.category import (
    CollapsedCategories,
    group_tasks_by_category,
    sorted_categories,
)


class TestSortedCategories:
    def test_lexicographic_order(self):
        categories = {"IT": [], "Branding": [], "Hiring": [], "China": []}

        assert sorted_categories(categories) == ["Branding", "China", "Hiring", "IT"]

    def test_idempotent(self):
        categories = {"b": [], "a": [], "c": []}
        once = sorted_categories(categories)

        assert once == ["a", "b", "c"]
        assert sorted_categories(dict.fromkeys(once)) == once

    def test_uppercase_sorts_before_lowercase(self):
        assert sorted_categories({"finishes": [], "OPENING": []}) == [
            "OPENING",
            "finishes",
        ]


def test_group_keeps_task_order(make_task):
    tasks = [
        make_task(1, "IT", "Buy laptops"),
        make_task(2, "Hiring", "Post JD"),
        make_task(3, "IT", "Set up wifi"),
    ]

    grouped = group_tasks_by_category(tasks)

    assert [task["id"] for task in grouped["IT"]] == [1, 3]
    assert [task["id"] for task in grouped["Hiring"]] == [2]


class TestCollapsedCategories:
    def test_toggle_collapses_and_expands(self):
        collapsed = CollapsedCategories()

        assert collapsed.toggle("IT") is True
        assert "IT" in collapsed
        assert collapsed.toggle("IT") is False
        assert "IT" not in collapsed
        assert len(collapsed) == 0

    def test_toggle_is_per_category(self):
        collapsed = CollapsedCategories(["Hiring"])
        collapsed.toggle("IT")

        assert list(collapsed) == ["Hiring", "IT"]
        assert collapsed.snapshot() == frozenset({"Hiring", "IT"})


class TestCategoryManagement:
    def test_rename_moves_every_task(self):
        timeline_service.create_task("IT", "Buy laptops")
        timeline_service.create_task("IT", "Set up wifi")
        timeline_service.create_task("Hiring", "Post JD")

        renamed_count = category_service.rename_category("IT", " Technology ")

        assert renamed_count == 2
        assert category_service.get_all_categories() == ["Hiring", "Technology"]

    def test_rename_to_empty_name_fails(self):
        timeline_service.create_task("IT", "Buy laptops")

        with pytest.raises(MissingFieldsError):
            category_service.rename_category("IT", "  ")

    def test_delete_cascades_to_events(self):
        laptops = timeline_service.create_task("IT", "Buy laptops")
        post_jd = timeline_service.create_task("Hiring", "Post JD")
        timeline_service.create_event(laptops["id"], "2024-11-14", "Start")
        timeline_service.create_event(post_jd["id"], "2024-11-14", "Start")

        deleted_count = category_service.delete_category("IT")

        assert deleted_count == 1
        assert [task["task"] for task in TASK_REPO.get_all_tasks()] == ["Post JD"]
        assert [event["task_id"] for event in EVENT_REPO.get_all_events()] == [
            post_jd["id"]
        ]

    def test_delete_unknown_category(self):
        assert category_service.delete_category("Nope") == 0
