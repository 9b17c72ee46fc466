# SPDX-License-Identifier: MIT

import pytest
from typer.testing import CliRunner

from weekline.repository.configuration import CONFIGURATION_REPO
from weekline.repository.event import EVENT_REPO
from weekline.repository.task import TASK_REPO
from weekline.service import timeline as timeline_service
from weekline.terminal.app import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def laptops():
    return timeline_service.create_task("IT", "Buy laptops")


class TestTaskCommands:
    def test_add(self, runner):
        result = runner.invoke(app, ["task", "add", "Hiring", "Post JD"])

        assert result.exit_code == 0, result.output
        assert "Post JD" in result.output
        assert [task["task"] for task in TASK_REPO.get_all_tasks()] == ["Post JD"]

    def test_add_with_alias(self, runner):
        result = runner.invoke(app, ["t", "a", "Hiring", "Post JD", "-o", "3"])

        assert result.exit_code == 0, result.output
        assert TASK_REPO.get_all_tasks()[0]["sort_order"] == 3

    def test_add_blank_task_fails(self, runner):
        result = runner.invoke(app, ["task", "add", "Hiring", " "])

        assert result.exit_code == 1
        assert TASK_REPO.get_all_tasks() == []

    def test_modify(self, runner, laptops):
        result = runner.invoke(
            app, ["task", "modify", str(laptops["id"]), "--task", "Buy monitors"]
        )

        assert result.exit_code == 0, result.output
        assert TASK_REPO.get_task(laptops["id"])["task"] == "Buy monitors"

    def test_modify_unknown(self, runner):
        result = runner.invoke(app, ["task", "modify", "42", "--task", "Nope"])

        assert result.exit_code == 1
        assert "No task found with id 42" in result.output

    def test_delete(self, runner, laptops):
        timeline_service.create_event(laptops["id"], "2024-11-14", "Start")

        result = runner.invoke(app, ["task", "delete", str(laptops["id"]), "--yes"])

        assert result.exit_code == 0, result.output
        assert TASK_REPO.get_all_tasks() == []
        assert EVENT_REPO.get_all_events() == []

    def test_list(self, runner, laptops):
        result = runner.invoke(app, ["--no-header", "task", "list"])

        assert result.exit_code == 0, result.output
        assert "Buy laptops" in result.output
        assert "weekline" not in result.output

    def test_form_creates_task_in_new_category(self, runner):
        result = runner.invoke(
            app, ["task", "form"], input="n\nSecurity\nAdd cameras\n"
        )

        assert result.exit_code == 0, result.output
        task = TASK_REPO.get_all_tasks()[0]
        assert (task["category"], task["task"]) == ("Security", "Add cameras")

    def test_form_edits_task(self, runner, laptops):
        result = runner.invoke(
            app, ["task", "form", "--id", str(laptops["id"])], input="\nBuy monitors\n\n"
        )

        assert result.exit_code == 0, result.output
        task = TASK_REPO.get_task(laptops["id"])
        assert (task["category"], task["task"]) == ("IT", "Buy monitors")


class TestEventCommands:
    def test_set_preset(self, runner, laptops):
        result = runner.invoke(
            app, ["event", "set", str(laptops["id"]), "2024-11-14", "Complete"]
        )

        assert result.exit_code == 0, result.output
        event = EVENT_REPO.find_event_at(laptops["id"], "2024-11-14")
        assert event["color"] == "#86efac"

    def test_set_rejects_bad_date(self, runner, laptops):
        result = runner.invoke(
            app, ["event", "set", str(laptops["id"]), "Nov 14", "Complete"]
        )

        assert result.exit_code == 2
        assert EVENT_REPO.get_all_events() == []

    def test_set_rejects_bad_color(self, runner, laptops):
        result = runner.invoke(
            app,
            ["e", "s", str(laptops["id"]), "2024-11-14", "Draft", "-col", "notacolor"],
        )

        assert result.exit_code == 2

    def test_set_unknown_task(self, runner):
        result = runner.invoke(app, ["event", "set", "42", "2024-11-14", "Start"])

        assert result.exit_code == 1

    def test_delete_and_list(self, runner, laptops):
        event = timeline_service.create_event(laptops["id"], "2024-11-14", "Start")

        list_result = runner.invoke(app, ["event", "list"])
        delete_result = runner.invoke(app, ["event", "delete", str(event["id"])])

        assert "Start" in list_result.output
        assert delete_result.exit_code == 0, delete_result.output
        assert EVENT_REPO.get_all_events() == []


class TestCategoryCommands:
    def test_rename(self, runner, laptops):
        result = runner.invoke(app, ["category", "rename", "IT", "Technology"])

        assert result.exit_code == 0, result.output
        assert TASK_REPO.get_task(laptops["id"])["category"] == "Technology"

    def test_rename_unknown(self, runner):
        result = runner.invoke(app, ["ca", "r", "Nope", "Other"])

        assert result.exit_code == 1

    def test_delete(self, runner, laptops):
        result = runner.invoke(app, ["category", "delete", "IT", "-y"])

        assert result.exit_code == 0, result.output
        assert TASK_REPO.get_all_tasks() == []


class TestViewCommands:
    def test_timeline(self, runner, laptops):
        timeline_service.create_task("Hiring", "Post JD")
        timeline_service.create_event(laptops["id"], "2024-11-14", "Start")

        result = runner.invoke(app, ["view", "timeline", "--all-weeks", "-w", "3"])

        assert result.exit_code == 0, result.output
        assert "Hiring" in result.output
        assert "Buy laptops" in result.output
        assert "Nov 14" in result.output
        assert "Start" in result.output
        assert "weeks 1-3 of 26" in result.output

    def test_timeline_collapsed(self, runner, laptops):
        result = runner.invoke(app, ["v", "tl", "--collapse", "IT"])

        assert result.exit_code == 0, result.output
        assert "IT" in result.output
        assert "Buy laptops" not in result.output

    def test_timeline_without_weeks(self, runner):
        CONFIGURATION_REPO.update_config(timeline_weeks=0)

        result = runner.invoke(app, ["view", "timeline"])

        assert result.exit_code == 0, result.output
        assert "No week dates configured" in result.output


class TestConfigCommands:
    def test_set_and_view(self, runner):
        result = runner.invoke(
            app, ["config", "set", "--timeline-weeks", "10", "--no-auto-color-events"]
        )

        assert result.exit_code == 0, result.output
        config = CONFIGURATION_REPO.get_config()
        assert config["timeline_weeks"] == 10
        assert config["auto_color_events"] is False

        view_result = runner.invoke(app, ["c", "v"])
        assert "10 weeks" in view_result.output

    def test_set_rejects_bad_start(self, runner):
        result = runner.invoke(app, ["config", "set", "--timeline-start", "soon"])

        assert result.exit_code == 2


def test_import(runner, tmp_path):
    sheet = tmp_path / "timeline.csv"
    sheet.write_text("Category,Task,Jan 9,Jan 16\nIT,Buy laptops,Start,Complete\n")

    result = runner.invoke(app, ["import", str(sheet), "--yes"])

    assert result.exit_code == 0, result.output
    assert len(EVENT_REPO.get_all_events()) == 2
    assert CONFIGURATION_REPO.get_week_dates() == ["2025-01-09", "2025-01-16"]


def test_view_summary(runner, laptops):
    timeline_service.create_event(laptops["id"], "2024-11-14", "Start")

    result = runner.invoke(app, ["view", "summary"])

    assert result.exit_code == 0, result.output
    assert "Nov 14 - May 8" in result.output
    assert "Categories" in result.output
    assert "Start" in result.output
