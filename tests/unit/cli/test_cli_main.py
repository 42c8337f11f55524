"""Tests for the command line interface."""

import json
import logging

import pytest
import yaml

from pattern_catalog.cli.main import execute_command, main, parse_args


@pytest.fixture(autouse=True)
def restore_package_logger(clean_env):
    package_logger = logging.getLogger("pattern_catalog")
    handlers = package_logger.handlers[:]
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.propagate = propagate


@pytest.mark.cli
class TestParseArgs:
    """Test cases for argument parsing."""

    def test_resource_and_action(self):
        args = parse_args(["patterns", "show", "builder"])

        assert args.resource == "patterns"
        assert args.action == "show"
        assert args.slug == "builder"

    def test_global_options(self):
        args = parse_args(["--format", "json", "--log-level", "DEBUG", "vehicles", "create", "car"])

        assert args.format == "json"
        assert args.log_level == "DEBUG"
        assert args.kind == "car"
        assert args.family is None

    def test_invalid_format_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--format", "xml", "patterns", "list"])


@pytest.mark.cli
class TestExecuteCommand:
    """Test cases for command routing."""

    def test_patterns_list(self, catalog):
        result = execute_command(parse_args(["patterns", "list"]), catalog)

        assert [p["slug"] for p in result["patterns"]][:2] == ["singleton", "factory"]

    def test_patterns_list_by_category(self, catalog):
        result = execute_command(parse_args(["patterns", "list", "--category", "structural"]), catalog)

        assert [p["slug"] for p in result["patterns"]] == ["adapter", "bridge"]

    def test_patterns_run(self, catalog):
        result = execute_command(parse_args(["patterns", "run", "prototype"]), catalog)

        assert result == {
            "pattern": "prototype",
            "output": ["Clone type: Car", "Template type: Vehicle"],
        }

    def test_vehicles_create_single_level(self):
        result = execute_command(parse_args(["vehicles", "create", "truck"]))

        assert result["vehicle"]["type"] == "Truck"
        assert result["description"] == "This is a Truck"

    def test_vehicles_create_with_family(self):
        result = execute_command(parse_args(["vehicles", "create", "ship", "--family", "water"]))

        assert result["vehicle"]["type"] == "Ship"

    def test_vehicles_kinds(self):
        result = execute_command(parse_args(["vehicles", "kinds"]))

        assert result == {"families": {"land": ["car", "truck"], "water": ["boat", "ship"]}}


@pytest.mark.cli
class TestMain:
    """Test cases for the CLI entry point."""

    def test_run_prints_demonstration(self, capsys):
        main(["patterns", "run", "factory"])

        assert capsys.readouterr().out == "This is a Car\nThis is a Truck\n"

    def test_json_output(self, capsys):
        main(["--format", "json", "vehicles", "create", "car"])

        data = json.loads(capsys.readouterr().out)
        assert data["vehicle"] == {"type": "Car", "wheels": 4}

    def test_yaml_output(self, capsys):
        main(["--format", "yaml", "patterns", "show", "bridge"])

        data = yaml.safe_load(capsys.readouterr().out)
        assert data["pattern"]["name"] == "Bridge"

    def test_table_output(self, capsys):
        main(["--format", "table", "patterns", "list"])

        out = capsys.readouterr().out
        assert "abstract-factory" in out
        assert "Adapter" in out

    def test_table_output_for_details_and_families(self, capsys):
        main(["--format", "table", "patterns", "show", "builder"])
        details = capsys.readouterr().out

        main(["--format", "table", "vehicles", "kinds"])
        families = capsys.readouterr().out

        assert "Nothing forces required parts" in details
        assert not details.lstrip().startswith("{")
        assert "car, truck" in families
        assert not families.lstrip().startswith("{")

    def test_output_file(self, capsys, tmp_path):
        target = tmp_path / "out.txt"

        main(["--output", str(target), "patterns", "run", "adapter"])

        assert target.read_text().startswith("Electric engine started")
        assert "Output written to" in capsys.readouterr().out

    def test_format_from_config_file(self, capsys, config_file):
        path = config_file("output:\n  format: json\n")

        main(["--config", path, "vehicles", "kinds"])

        assert json.loads(capsys.readouterr().out)["families"]["land"] == ["car", "truck"]

    def test_unknown_variant_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["vehicles", "create", "bicycle"])

        assert exc_info.value.code == 1
        assert "Error: Unknown variant 'bicycle'" in capsys.readouterr().out

    def test_unknown_family_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["vehicles", "create", "car", "--family", "air"])

        assert exc_info.value.code == 1
        assert "Unknown family 'air'" in capsys.readouterr().out

    def test_unknown_pattern_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["patterns", "show", "observer"])

        assert exc_info.value.code == 1
        assert "Pattern with ID observer not found" in capsys.readouterr().out

    def test_quiet_suppresses_error_message(self, capsys):
        with pytest.raises(SystemExit):
            main(["--quiet", "vehicles", "create", "bicycle"])

        assert capsys.readouterr().out == ""

    def test_missing_resource(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "No resource specified" in capsys.readouterr().out

    def test_missing_action(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["patterns"])

        assert exc_info.value.code == 1
        assert "No action specified for patterns" in capsys.readouterr().out

    def test_invalid_config_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "missing.yml"), "patterns", "list"])

        assert exc_info.value.code == 1
        assert "Configuration file not found" in capsys.readouterr().out
