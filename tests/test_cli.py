"""Smoke tests for the command line interface."""

import json

from gleaning.repository.configuration import CONFIGURATION_REPO
from gleaning.repository.id_map import ID_MAP_REPO
from gleaning.repository.store import STORE
from gleaning.service.backup import backup_filename
from gleaning.terminal.app import app
from gleaning.view import state as view_state


def _writing_id() -> str:
    return STORE.get_all_projects()[0]["id"]


class TestProjectCommands:
    def test_starter_projects_listed(self, cli):
        result = cli.invoke(app, ["project", "list"])

        assert result.exit_code == 0
        for name in ("Writing", "Movement", "Aesthetics"):
            assert name in result.output

    def test_add_and_alias(self, cli):
        result = cli.invoke(app, ["p", "a", "Reading"])

        assert result.exit_code == 0
        assert "Reading" in [p["name"] for p in STORE.get_all_projects()]

    def test_blank_name_is_an_error(self, cli):
        result = cli.invoke(app, ["project", "add", "  "])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_move(self, cli):
        cli.invoke(app, ["project", "list"])
        result = cli.invoke(app, ["project", "move", "1", "3"])

        assert result.exit_code == 0
        assert [p["name"] for p in STORE.get_all_projects()] == [
            "Movement",
            "Aesthetics",
            "Writing",
        ]

    def test_delete_with_confirmation(self, cli):
        cli.invoke(app, ["project", "list"])
        result = cli.invoke(app, ["project", "delete", "2"], input="y\n")

        assert result.exit_code == 0
        assert [p["name"] for p in STORE.get_all_projects()] == ["Writing", "Aesthetics"]

    def test_unknown_synthetic_id(self, cli):
        result = cli.invoke(app, ["project", "show", "42"])
        assert result.exit_code != 0

    def test_new_projects_get_palette_tokens(self, cli):
        cli.invoke(app, ["project", "list"])

        assert STORE.get_all_projects()[0]["color"] == "bg-[#D8E2DC]"

    def test_modify_color_stores_token(self, cli):
        cli.invoke(app, ["project", "list"])
        result = cli.invoke(app, ["project", "modify", "1", "--color", "#123456"])

        assert result.exit_code == 0
        assert STORE.get_all_projects()[0]["color"] == "bg-[#123456]"

    def test_modify_rejects_non_hex_color(self, cli):
        cli.invoke(app, ["project", "list"])
        result = cli.invoke(app, ["project", "modify", "1", "--color", "red"])

        assert result.exit_code == 2
        assert STORE.get_all_projects()[0]["color"] == "bg-[#D8E2DC]"


class TestEntryCommands:
    def test_set_twice_keeps_one_entry(self, cli):
        cli.invoke(app, ["project", "list"])

        first = cli.invoke(app, ["entry", "set", "2024-05-03", "1", "First pages"])
        second = cli.invoke(app, ["entry", "set", "2024-05-03", "1", "Second draft"])

        assert first.exit_code == 0
        assert second.exit_code == 0
        cell = [
            entry
            for entry in STORE.get_all_entries()
            if entry["date"] == "2024-05-03" and entry["project_id"] == _writing_id()
        ]
        assert len(cell) == 1
        assert cell[0]["content"] == "Second draft"

    def test_show_and_delete(self, cli):
        cli.invoke(app, ["project", "list"])
        cli.invoke(app, ["entry", "set", "2024-05-03", "1", "First pages"])

        shown = cli.invoke(app, ["entry", "show", "2024-05-03", "1"])
        deleted = cli.invoke(app, ["entry", "delete", "2024-05-03", "1", "--yes"])

        assert "First pages" in shown.output
        assert deleted.exit_code == 0
        assert STORE.get_entry_for_cell("2024-05-03", _writing_id()) is None

    def test_finished_project_rejects_entries(self, cli):
        cli.invoke(app, ["project", "list"])
        cli.invoke(app, ["project", "finish", "1"])

        result = cli.invoke(app, ["entry", "set", "2024-05-03", "1", "Too late"])

        assert result.exit_code == 1
        assert STORE.get_all_entries() == []

    def test_bad_date(self, cli):
        cli.invoke(app, ["project", "list"])
        result = cli.invoke(app, ["entry", "set", "2024-02-30", "1", "x"])
        assert result.exit_code != 0


class TestInspirationCommands:
    def test_add_link_and_hide(self, cli):
        cli.invoke(app, ["project", "list"])
        added = cli.invoke(app, ["inspiration", "add", "Try charcoal", "-p", "1"])
        assert added.exit_code == 0
        assert STORE.get_all_inspirations()[0]["project_id"] == _writing_id()

        hidden = cli.invoke(app, ["inspiration", "hide", "1"])
        listed = cli.invoke(app, ["inspiration", "list"])
        archived = cli.invoke(app, ["inspiration", "list", "--filter", "hidden"])

        assert hidden.exit_code == 0
        assert "Try charcoal" not in listed.output
        assert "Try charcoal" in archived.output

    def test_modify_unlink(self, cli):
        cli.invoke(app, ["project", "list"])
        cli.invoke(app, ["inspiration", "add", "Try charcoal", "-p", "1"])

        result = cli.invoke(app, ["inspiration", "modify", "1", "--unlink"])

        assert result.exit_code == 0
        assert STORE.get_all_inspirations()[0]["project_id"] is None

    def test_delete(self, cli):
        cli.invoke(app, ["inspiration", "add", "Short lived"])
        result = cli.invoke(app, ["inspiration", "delete", "1"], input="y\n")

        assert result.exit_code == 0
        assert STORE.get_all_inspirations() == []

    def test_toggle_hides_then_restores(self, cli):
        cli.invoke(app, ["inspiration", "add", "Try charcoal"])

        hidden = cli.invoke(app, ["inspiration", "toggle", "1"])
        assert hidden.exit_code == 0
        assert STORE.get_all_inspirations()[0]["is_hidden"] is True

        restored = cli.invoke(app, ["i", "t", "1"])
        assert restored.exit_code == 0
        assert STORE.get_all_inspirations()[0]["is_hidden"] is False

    def test_list_is_newest_first(self, cli, tmp_path):
        backup_path = tmp_path / "backup.json"
        backup_path.write_text(
            json.dumps(
                {
                    "projects": [],
                    "entries": [],
                    "inspirations": [
                        {
                            "id": "i1",
                            "content": "OLDER idea",
                            "createdAt": "2023-01-01T10:00:00.000Z",
                        },
                        {
                            "id": "i2",
                            "content": "NEWER idea",
                            "createdAt": "2024-06-01T10:00:00.000Z",
                        },
                    ],
                }
            )
        )
        cli.invoke(app, ["backup", "import", str(backup_path), "--yes"])

        result = cli.invoke(app, ["inspiration", "list"])

        assert result.exit_code == 0
        assert result.output.index("NEWER") < result.output.index("OLDER")


class TestViewCommands:
    def test_matrix(self, cli):
        result = cli.invoke(app, ["view", "matrix", "--month", "2024-05"])

        assert result.exit_code == 0
        assert "May 2024" in result.output

    def test_stats_all_time(self, cli):
        result = cli.invoke(app, ["view", "stats", "--month", "all"])

        assert result.exit_code == 0
        assert "All time" in result.output
        assert "Writing" in result.output

    def test_months(self, cli):
        cli.invoke(app, ["project", "list"])
        cli.invoke(app, ["entry", "set", "2023-11-04", "1", "Old note"])

        result = cli.invoke(app, ["view", "months"])

        assert result.exit_code == 0
        assert "2023-11" in result.output

    def test_bad_month(self, cli):
        result = cli.invoke(app, ["view", "stats", "--month", "2024-13"])
        assert result.exit_code != 0


class TestBackupCommands:
    def test_export_then_import(self, cli, tmp_path):
        export_dir = tmp_path / "exports"
        export_dir.mkdir()

        exported = cli.invoke(app, ["backup", "export", str(export_dir)])
        backup_path = export_dir / backup_filename()
        cli.invoke(app, ["project", "add", "Temporary"])
        imported = cli.invoke(app, ["backup", "import", str(backup_path), "--yes"])

        assert exported.exit_code == 0
        assert json.loads(backup_path.read_text())["version"] == "1"
        assert imported.exit_code == 0
        assert "Temporary" not in [p["name"] for p in STORE.get_all_projects()]

    def test_import_declined(self, cli, tmp_path):
        backup_path = tmp_path / "backup.json"
        cli.invoke(app, ["backup", "export", str(backup_path)])
        cli.invoke(app, ["project", "add", "Kept"])

        result = cli.invoke(app, ["backup", "import", str(backup_path)], input="n\n")

        assert result.exit_code == 0
        assert "Kept" in [p["name"] for p in STORE.get_all_projects()]

    def test_import_rejects_bad_file(self, cli, tmp_path):
        backup_path = tmp_path / "backup.json"
        backup_path.write_text('{"projects": []}')
        before = STORE.get_all_projects()

        result = cli.invoke(app, ["backup", "import", str(backup_path), "--yes"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert STORE.get_all_projects() == before

    def test_bad_file_fails_before_confirmation(self, cli, tmp_path):
        backup_path = tmp_path / "backup.json"
        backup_path.write_text('{"projects": []}')

        result = cli.invoke(app, ["backup", "import", str(backup_path)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Continue?" not in result.output


class TestConfigCommands:
    def test_set_and_show(self, cli):
        result = cli.invoke(app, ["config", "set", "--no-show-header", "--log-level", "info"])
        shown = cli.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        config = CONFIGURATION_REPO.get_config()
        assert config["show_header"] is False
        assert config["log_level"] == "INFO"
        assert "log_level" in shown.output

    def test_rejects_unknown_log_level(self, cli):
        result = cli.invoke(app, ["config", "set", "--log-level", "loud"])
        assert result.exit_code != 0


class TestGlobalOptions:
    def test_no_clear_ids_keeps_numbering(self, cli):
        cli.invoke(app, ["project", "list"])
        movement_id = STORE.get_all_projects()[1]["id"]
        cli.invoke(app, ["project", "delete", "1", "--yes"])

        result = cli.invoke(app, ["--no-clear-ids", "project", "list"])

        assert result.exit_code == 0
        assert view_state.get_clear_ids() is False
        assert ID_MAP_REPO.get_real_id("projects", 2) == movement_id

    def test_clear_ids_renumbers(self, cli):
        cli.invoke(app, ["project", "list"])
        movement_id = STORE.get_all_projects()[1]["id"]
        cli.invoke(app, ["project", "delete", "1", "--yes"])

        result = cli.invoke(app, ["--clear-ids", "project", "list"])

        assert result.exit_code == 0
        assert ID_MAP_REPO.get_real_id("projects", 1) == movement_id
