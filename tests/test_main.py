"""Tests for the command-line entry point."""
import json

import main


class TestMain:
    """Tests for main.main."""

    def test_json_output(self, ifv_file, capsys):
        """Test scores are printed as JSON in input order."""
        exit_code = main.main(["--input", str(ifv_file), "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert payload["results"] == [
            {"name": "A", "riq": 0.4683},
            {"name": "B", "riq": -0.44},
            {"name": "C", "riq": 0.5733},
        ]
        assert payload["warnings"] == []

    def test_json_sorted(self, ifv_file, capsys):
        """Test --sort ranks the JSON results."""
        main.main(["--input", str(ifv_file), "--json", "--sort"])

        payload = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in payload["results"]] == ["C", "A", "B"]

    def test_table_output(self, ifv_file, capsys):
        """Test the default console report."""
        exit_code = main.main(["--input", str(ifv_file)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "RIQ RESULTS" in out
        assert "-0.4400" in out

    def test_singular_set_reports_null(self, tmp_path, capsys):
        """Test a one-element set returns null with a warning, not an error."""
        path = tmp_path / "single.json"
        path.write_text(json.dumps([{"name": "solo", "mu": 0.6, "nu": 0.3}]), encoding="utf-8")

        exit_code = main.main(["--input", str(path), "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert payload["results"] == [{"name": "solo", "riq": None}]
        assert len(payload["warnings"]) == 1

    def test_missing_file(self, tmp_path):
        """Test a missing input file exits with 1."""
        assert main.main(["--input", str(tmp_path / "missing.json")]) == 1

    def test_malformed_file(self, tmp_path):
        """Test malformed records exit with 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"ifvs": [{"name": "A"}]}), encoding="utf-8")

        assert main.main(["--input", str(path)]) == 1

    def test_invalid_decimal_places(self, ifv_file):
        """Test an unusable precision exits with 1."""
        assert main.main(["--input", str(ifv_file), "--decimal-places", "-2"]) == 1
