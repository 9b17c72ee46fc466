# SPDX-License-Identifier: MIT

import pendulum
import pytest

from weekline.color import DEFAULT_EVENT_COLOR
from weekline.service.category import CollapsedCategories
from weekline.service.event_index import EventIndex
from weekline.view.grid import LABEL_COLUMN_HEADER, TimelineChart, build_timeline_grid

WEEK_DATES = ["2024-01-01", "2024-01-08"]
# Tuesday in the week of Sunday 2024-01-07
NOW = pendulum.datetime(2024, 1, 9, 12, 0, 0, tz="local")


@pytest.fixture
def categories(make_task):
    return {
        "IT": [make_task(2, "IT", "Buy laptops")],
        "Hiring": [make_task(1, "Hiring", "Post JD")],
    }


class TestBuildTimelineGrid:
    def test_categories_in_order_with_empty_cells(self, categories):
        grid = build_timeline_grid(
            categories, EventIndex([]), WEEK_DATES, CollapsedCategories(), NOW
        )

        assert grid["label_header"] == LABEL_COLUMN_HEADER
        assert [row["category"] for row in grid["categories"]] == ["Hiring", "IT"]
        for category_row in grid["categories"]:
            assert category_row["task_count"] == 1
            assert len(category_row["task_rows"]) == 1
            cells = category_row["task_rows"][0]["cells"]
            assert [cell["week_date"] for cell in cells] == WEEK_DATES
            assert all(cell["event"] is None for cell in cells)
            assert all(cell["color"] is None for cell in cells)

    def test_event_cell_shows_label_and_color(self, categories, make_event):
        index = EventIndex([make_event(1, 1, "2024-01-01", "Draft", "#ff0000")])

        grid = build_timeline_grid(
            categories, index, WEEK_DATES, CollapsedCategories(), NOW
        )

        hiring_cells = grid["categories"][0]["task_rows"][0]["cells"]
        assert hiring_cells[0]["label"] == "Draft"
        assert hiring_cells[0]["color"] == "#ff0000"
        assert hiring_cells[1]["event"] is None
        it_cells = grid["categories"][1]["task_rows"][0]["cells"]
        assert all(cell["event"] is None for cell in it_cells)

    def test_event_without_color_uses_default(self, categories, make_event):
        index = EventIndex([make_event(1, 1, "2024-01-08", "Review")])

        grid = build_timeline_grid(
            categories, index, WEEK_DATES, CollapsedCategories(), NOW
        )

        cell = grid["categories"][0]["task_rows"][0]["cells"][1]
        assert cell["color"] == DEFAULT_EVENT_COLOR

    def test_collapsed_category_keeps_count(self, categories):
        grid = build_timeline_grid(
            categories, EventIndex([]), WEEK_DATES, CollapsedCategories(["IT"]), NOW
        )

        it_row = grid["categories"][1]
        assert it_row["collapsed"] is True
        assert it_row["task_count"] == 1
        assert it_row["task_rows"] == []
        assert grid["categories"][0]["collapsed"] is False

    def test_current_week_is_highlighted(self, categories):
        grid = build_timeline_grid(
            categories, EventIndex([]), WEEK_DATES, CollapsedCategories(), NOW
        )

        assert [cell["is_current"] for cell in grid["header"]] == [False, True]
        assert [cell["is_past"] for cell in grid["header"]] == [True, False]
        assert [cell["label"] for cell in grid["header"]] == ["Jan 1", "Jan 8"]
        assert grid["current_week_index"] == 1

    def test_empty_week_axis(self, categories):
        grid = build_timeline_grid(
            categories, EventIndex([]), [], CollapsedCategories(), NOW
        )

        assert grid["header"] == []
        assert grid["current_week_index"] is None
        assert grid["categories"][0]["task_rows"][0]["cells"] == []


class TestTimelineChart:
    @pytest.fixture
    def clicks(self):
        return {"cell": [], "task": [], "toggle": []}

    @pytest.fixture
    def chart(self, clicks):
        return TimelineChart(
            on_cell_click=lambda *args: clicks["cell"].append(args),
            on_task_click=lambda task: clicks["task"].append(task),
            on_category_toggle=lambda category: clicks["toggle"].append(category),
        )

    def test_cell_click_resolves_event(self, chart, clicks, categories, make_event):
        events = [make_event(7, 1, "2024-01-01", "Draft", "#ff0000")]
        chart.render(categories, events, WEEK_DATES, CollapsedCategories(), NOW)

        chart.click_cell(1, "2024-01-01")
        chart.click_cell(1, "2024-01-08")

        assert clicks["cell"][0][0:2] == (1, "2024-01-01")
        assert clicks["cell"][0][2]["id"] == 7
        assert clicks["cell"][1] == (1, "2024-01-08", None)

    def test_task_click_does_not_click_cell(self, chart, clicks, categories):
        chart.render(categories, [], WEEK_DATES, CollapsedCategories(), NOW)

        chart.click_task(categories["IT"][0])

        assert [task["id"] for task in clicks["task"]] == [2]
        assert clicks["cell"] == []

    def test_category_click_toggles(self, chart, clicks):
        chart.click_category("IT")

        assert clicks["toggle"] == ["IT"]

    def test_scrolls_to_current_week_once(self, chart, categories):
        week_dates = [
            "2023-12-10",
            "2023-12-17",
            "2023-12-24",
            "2023-12-31",
            "2024-01-07",
            "2024-01-14",
        ]
        assert chart.scroll_state == "not_attempted"

        chart.render(categories, [], week_dates, CollapsedCategories(), NOW)

        assert chart.scroll_state == "scrolled"
        assert chart.scroll_column == 2
        assert chart.scroll_offset(8) == 16

        later = pendulum.datetime(2024, 1, 16, tz="local")
        chart.render(categories, [], week_dates, CollapsedCategories(), later)
        assert chart.scroll_column == 2

    def test_scroll_waits_for_week_axis(self, chart, categories):
        chart.render(categories, [], [], CollapsedCategories(), NOW)
        assert chart.scroll_state == "not_attempted"

        chart.render(categories, [], WEEK_DATES, CollapsedCategories(), NOW)
        assert chart.scroll_state == "scrolled"
        assert chart.scroll_column == 0

    def test_no_current_week_is_noop(self, chart, categories):
        future = ["2030-01-06", "2030-01-13"]

        chart.render(categories, [], future, CollapsedCategories(), NOW)

        assert chart.scroll_state == "noop"
        assert chart.scroll_column == 0


def test_click_with_current_events_sees_refreshed_data(categories, make_event):
    clicked = []
    chart = TimelineChart(
        on_cell_click=lambda *args: clicked.append(args),
        on_task_click=lambda task: None,
        on_category_toggle=lambda category: None,
    )
    chart.render(categories, [], WEEK_DATES, CollapsedCategories(), NOW)
    refreshed = [make_event(9, 1, "2024-01-01", "Draft")]

    chart.click_cell(1, "2024-01-01")
    chart.click_cell(1, "2024-01-01", refreshed)

    assert clicked[0][2] is None
    assert clicked[1][2]["id"] == 9
