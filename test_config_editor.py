"""
Tests for the terminal collaborators: notifications, the interactive editor
and the command line entry point.
"""

import io
import json

import pytest
from rich.console import Console
from rich.prompt import Prompt

import main
from action_config import ActionKind, ActionRegistry, ConfigExporter, default_document, to_artifact
from ui.config_editor import InteractiveConfigEditor
from ui.design_system import ds
from ui.notifications import NotificationManager


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, theme=ds.theme)


@pytest.fixture
def notifications(console):
    return NotificationManager(console)


@pytest.fixture
def exported():
    return []


@pytest.fixture
def editor(console, notifications, exported):
    registry = ActionRegistry(default_document(), notifications=notifications)
    exporter = ConfigExporter(notifications=notifications, sink=exported.append)
    return InteractiveConfigEditor(registry, exporter, notifications, console)


@pytest.fixture
def answers(monkeypatch):
    """Script Prompt.ask with a list of answers"""
    def script(*replies):
        queue = iter(replies)
        monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: next(queue))
    return script


class TestNotifications:
    def test_history_and_output(self, notifications, console):
        notifications.success("Success - config exported!")
        notifications.error("Names clash", title="Duplicate Action Names")

        assert [n['type'] for n in notifications.notification_history] == ["success", "error"]
        assert notifications.last['title'] == "Duplicate Action Names"
        output = console.file.getvalue()
        assert "Success - config exported!" in output
        assert "Names clash" in output

    def test_clear(self, notifications):
        notifications.warning("careful")
        notifications.clear()
        assert notifications.last['type'] is None


class TestEditor:
    def test_add_rename_and_export(self, editor, answers, exported, notifications):
        answers("a", "3", "say hi", "The Buyer should say hi.", "x", "q")

        result = editor.run()

        assert result.success
        assert result.artifact["actions"][-1] == {
            "name": "say hi",
            "type": "SubmitBotInstruction",
            "instruction": "The Buyer should say hi.",
        }
        assert exported == [result.json]
        assert notifications.notification_history[0]['message'] == (
            "SubmitBotInstruction created, please fill in the corresponding information :)"
        )
        assert notifications.last['message'] == "Success - config exported!"

    def test_duplicate_blocks_export(self, editor, answers, exported, notifications, console):
        answers("e", "1", "n", "acceptOffer", "x", "q")

        result = editor.run()

        assert not result.success
        assert result.error.offending_names == frozenset({"acceptOffer"})
        assert exported == []
        assert notifications.last['type'] == "error"
        assert "Duplicate names: acceptOffer" in console.file.getvalue()

    def test_change_kind(self, editor, answers):
        answers("e", "2", "t", "1", "q")

        editor.run()

        action = editor.registry.get(1)
        assert action.kind is ActionKind.ACCEPT_OFFER
        assert action.instruction is not None

    def test_edit_instruction(self, editor, answers):
        answers("e", "4", "i", "The Buyer should tell two jokes.", "q")

        editor.run()

        assert editor.registry.get(3).instruction == "The Buyer should tell two jokes."

    def test_remove(self, editor, answers):
        answers("r", "2", "q")

        editor.run()

        assert [a.name for a in editor.registry.actions] == ["rejectOffer1", "acceptOffer", "tell a joke"]

    @pytest.mark.parametrize("reply", ["9", "0", "two"])
    def test_invalid_position_is_ignored(self, editor, answers, notifications, reply):
        answers("r", reply, "q")

        assert editor.run() is None
        assert len(editor.registry) == 4
        assert notifications.last['type'] == "warning"

    def test_quit_without_export(self, editor, answers, exported):
        answers("q")
        assert editor.run() is None
        assert exported == []

    def test_failed_write_keeps_session(self, console, notifications, answers):
        def full_disk(text):
            raise OSError("disk full")

        registry = ActionRegistry(default_document(), notifications=notifications)
        exporter = ConfigExporter(notifications=notifications, sink=full_disk)
        editor = InteractiveConfigEditor(registry, exporter, notifications, console)
        answers("r", "1", "x", "q")

        assert editor.run() is None
        assert len(editor.registry) == 3
        assert notifications.last['type'] == "error"
        assert notifications.last['title'] == "Export Failed"
        assert "disk full" in notifications.last['message']


class TestMain:
    def test_export_only_to_file(self, tmp_path):
        output = tmp_path / "config.json"

        assert main.main(["--export-only", "--output", str(output)]) == 0
        assert json.loads(output.read_text()) == to_artifact(default_document())

    def test_export_only_rejects_duplicates(self, tmp_path):
        source = tmp_path / "dup.json"
        source.write_text(json.dumps({
            "name": "dup",
            "version": "1",
            "actions": [
                {"name": "same", "type": "AcceptOffer"},
                {"name": "same", "type": "RejectOffer"},
            ],
        }))
        output = tmp_path / "out.json"

        assert main.main(["--config", str(source), "--export-only", "--output", str(output)]) == 1
        assert not output.exists()

    def test_bad_config_file(self, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"name": "x", "version": "1", "actions": [{"name": "a", "type": "Nope"}]}))

        assert main.main(["--config", str(source), "--export-only"]) == 1

    @pytest.mark.parametrize("content", [
        "[]",
        json.dumps({"name": "x", "version": "1", "actions": [{"name": None, "type": "AcceptOffer"}]}),
        "{not json",
    ])
    def test_malformed_config_file(self, tmp_path, content):
        source = tmp_path / "bad.json"
        source.write_text(content)

        assert main.main(["--config", str(source), "--export-only"]) == 1

    def test_unwritable_output(self, tmp_path):
        output = tmp_path / "missing" / "config.json"
        assert main.main(["--export-only", "--output", str(output)]) == 1

    def test_export_only_stdout_is_pure_json(self, capsys):
        assert main.main(["--export-only"]) == 0

        captured = capsys.readouterr()
        assert json.loads(captured.out) == to_artifact(default_document())
        assert "Success - config exported!" in captured.err
