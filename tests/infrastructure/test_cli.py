"""End-to-end tests for the click commands and the console menu."""

import pytest
from click.testing import CliRunner

from pms.infrastructure.cli.main import cli
from pms.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def run(tmp_path):
    """Invoke the CLI against an empty JSON catalog in ``tmp_path``."""
    runner = CliRunner()
    env = {"PMS_DATA_DIR": str(tmp_path), "PMS_SEED": "false", "PMS_STORE": "json"}

    def _run(*args, input=None):
        return runner.invoke(cli, list(args), env=env, input=input)

    return _run


class TestItemCommands:

    def test_list_empty(self, run):
        result = run("item", "list")
        assert result.exit_code == 0
        assert "No items found." in result.output

    def test_add_then_list(self, run):
        result = run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
                     "--quantity", "5")
        assert result.exit_code == 0, result.output
        assert "Item added with ID 1" in result.output

        listing = run("item", "list")
        assert "Widget" in listing.output
        assert "10.00 RUB" in listing.output

    def test_duplicate_requires_merge_flag(self, run):
        args = ("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
                "--quantity", "5")
        run(*args)

        rejected = run(*args)
        assert rejected.exit_code == 1
        assert "--merge" in rejected.output

        merged = run(*args[:-1], "3", "--merge")
        assert merged.exit_code == 0
        assert "New quantity: 8" in merged.output

    def test_invalid_price_is_reported(self, run):
        result = run("item", "add", "--name", "Widget", "--price", "abc", "--category", "Tools")
        assert result.exit_code == 1
        assert "Invalid money amount" in result.output

    def test_invalid_name_is_reported(self, run):
        result = run("item", "add", "--name", "Bad<Name>", "--price", "1", "--category", "Tools")
        assert result.exit_code == 1
        assert "forbidden" in result.output

    def test_show(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
            "--description", "Small part")
        result = run("item", "show", "--id", "1")
        assert result.exit_code == 0
        assert "Small part" in result.output

    def test_show_missing(self, run):
        result = run("item", "show", "--id", "9")
        assert result.exit_code == 1
        assert "Item #9 not found" in result.output

    def test_update_keeps_omitted_fields(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
            "--quantity", "5")
        result = run("item", "update", "--id", "1", "--price", "12.5")
        assert result.exit_code == 0
        details = run("item", "show", "--id", "1").output
        assert "12.50 RUB" in details
        assert "In stock:    5" in details

    def test_stock_movements(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
            "--quantity", "5")

        assert run("item", "add-stock", "--id", "1", "--quantity", "3").exit_code == 0
        assert run("item", "remove-stock", "--id", "1", "--quantity", "2").exit_code == 0
        assert "In stock:    6" in run("item", "show", "--id", "1").output

    def test_remove_negative_quantity_fails(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools")
        result = run("item", "remove-stock", "--id", "1", "--quantity", "-1")
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_reduce(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
            "--quantity", "5")
        partial = run("item", "reduce", "--id", "1", "--quantity", "2")
        assert "Quantity reduced. Remaining: 3" in partial.output

        full = run("item", "reduce", "--id", "1", "--quantity", "0")
        assert "Item deleted completely" in full.output
        assert run("item", "reduce", "--id", "1", "--quantity", "1").exit_code == 1

    def test_delete_asks_for_confirmation(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools")

        aborted = run("item", "delete", "--id", "1", input="n\n")
        assert aborted.exit_code == 1
        assert "Widget" in run("item", "list").output

        deleted = run("item", "delete", "--id", "1", "--yes")
        assert deleted.exit_code == 0
        assert "No items found." in run("item", "list").output

    def test_filter_search_groups_and_value(self, run):
        run("item", "add", "--name", "Widget", "--price", "10", "--category", "Tools",
            "--quantity", "8")
        run("item", "add", "--name", "Cable", "--price", "2.5", "--category", "Electronics",
            "--quantity", "4", "--description", "USB-C")

        filtered = run("item", "filter", "--category", "tools").output
        assert "Widget" in filtered and "Cable" not in filtered

        found = run("item", "search", "usb").output
        assert "Cable" in found and "Widget" not in found

        groups = run("item", "groups").output
        assert "Tools" in groups and "Electronics" in groups

        assert "Total inventory value: 90.00 RUB" in run("item", "value").output


class TestStoreOption:

    def test_unknown_store_rejected(self, run):
        result = run("--store", "mongo", "item", "list")
        assert result.exit_code == 2

    def test_default_store_keeps_changes_between_runs(self, tmp_path):
        runner = CliRunner()
        # None unsets the variable for the invocation
        env = {"PMS_DATA_DIR": str(tmp_path), "PMS_STORE": None, "PMS_SEED": None,
               "PMS_DATABASE_URL": None}

        added = runner.invoke(
            cli,
            ["item", "add", "--name", "Gizmo", "--price", "15", "--category", "Tools"],
            env=env,
        )
        assert added.exit_code == 0, added.output
        assert "Item added with ID 11" in added.output

        shown = runner.invoke(cli, ["item", "show", "--id", "11"], env=env)
        assert shown.exit_code == 0, shown.output
        assert "Gizmo" in shown.output
        assert (tmp_path / "catalog.json").exists()

    def test_memory_store_is_seeded(self, tmp_path):
        result = CliRunner().invoke(
            cli, ["--store", "memory", "item", "list"], env={"PMS_DATA_DIR": str(tmp_path)}
        )
        assert result.exit_code == 0
        assert "Laptop" in result.output


class TestMenu:

    def _menu(self, tmp_path, keystrokes):
        return CliRunner().invoke(
            cli,
            ["--store", "memory", "menu"],
            env={"PMS_DATA_DIR": str(tmp_path)},
            input="".join(line + "\n" for line in keystrokes),
        )

    def test_list_and_exit(self, tmp_path):
        result = self._menu(tmp_path, ["1", "0"])
        assert result.exit_code == 0
        assert "Laptop" in result.output
        assert result.output.rstrip().endswith("Bye.")

    def test_invalid_choice(self, tmp_path):
        result = self._menu(tmp_path, ["x", "0"])
        assert "Invalid choice." in result.output

    def test_add_duplicate_and_merge(self, tmp_path):
        result = self._menu(
            tmp_path, ["3", "Laptop", "", "75000", "Electronics", "2", "y", "2", "1", "0"]
        )
        assert "New quantity: 12" in result.output
        assert "In stock:    12" in result.output

    def test_validation_error_keeps_menu_running(self, tmp_path):
        result = self._menu(tmp_path, ["3", "Bad{name}", "", "10", "Tools", "1", "0"])
        assert "Validation error:" in result.output
        assert "Bye." in result.output

    def test_delete_by_quantity(self, tmp_path):
        result = self._menu(tmp_path, ["9", "1", "4", "0"])
        assert "Quantity reduced. Remaining: 6" in result.output

    def test_update_keeps_blank_fields(self, tmp_path):
        result = self._menu(tmp_path, ["4", "1", "", "", "80000", "", "", "2", "1", "0"])
        assert "Item updated." in result.output
        assert "80 000.00 RUB" in result.output
        assert "Name:        Laptop" in result.output

    def test_update_can_clear_description(self, tmp_path):
        result = self._menu(tmp_path, ["4", "1", "", "-", "", "", "", "2", "1", "0"])
        assert "Item updated." in result.output
        assert "Powerful gaming laptop" not in result.output.split("Item updated.")[1]
        assert "Description: \n" in result.output
