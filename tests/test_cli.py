from datetime import date
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from http_api_docs.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliGenerate:
    def test_generate_from_yaml(self, tmp_path):
        output_file = tmp_path / "docs" / "api.md"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "ipfs-api.yaml"),
            "-o", str(output_file),
            "--date", "2020-02-11",
        ])

        assert result.exit_code == 0, result.output
        assert "Found 3 endpoints." in result.output
        content = output_file.read_text(encoding="utf-8")
        assert "_Generated on 2020-02-11, from go-ipfs v0.4.23._" in content
        assert "## /api/v0/swarm/peers" in content

    def test_version_option_overrides_schema(self, tmp_path):
        output_file = tmp_path / "api.md"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "ipfs-api.yaml"),
            "-o", str(output_file),
            "--api-version", "0.5.0",
        ])

        assert result.exit_code == 0
        assert "from go-ipfs v0.5.0." in output_file.read_text(encoding="utf-8")

    def test_version_from_environment(self, tmp_path):
        output_file = tmp_path / "api.md"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["generate", str(FIXTURES / "endpoints.json"), "-o", str(output_file)],
            env={"HTTP_API_DOCS_VERSION": "0.6.0"},
        )

        assert result.exit_code == 0
        assert "from go-ipfs v0.6.0." in output_file.read_text(encoding="utf-8")

    def test_missing_version_fails(self, tmp_path):
        output_file = tmp_path / "api.md"
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["generate", str(FIXTURES / "endpoints.json"), "-o", str(output_file)],
            env={"HTTP_API_DOCS_VERSION": None},
        )

        assert result.exit_code == 2
        assert "--api-version" in result.output
        assert not output_file.exists()

    def test_invalid_schema_fails(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("- name: /api/v0/x\n  arguments:\n    - name: a\n      type: complex128\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(bad), "-o", str(tmp_path / "api.md"), "--api-version", "1"])

        assert result.exit_code == 1
        assert "invalid endpoint definition" in result.output

    def test_unreadable_schema_fails(self, tmp_path):
        bad = tmp_path / "latin1.yaml"
        bad.write_bytes(b"- name: /api/v0/id\n  description: \xff\xfe\n")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(bad), "-o", str(tmp_path / "api.md"), "--api-version", "1"])

        assert result.exit_code == 1
        assert "cannot read schema" in result.output

    @patch("http_api_docs.cli.date")
    def test_date_defaults_to_today(self, mock_date, tmp_path):
        mock_date.today.return_value = date(2019, 7, 1)
        output_file = tmp_path / "api.md"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "ipfs-api.yaml"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        assert "_Generated on 2019-07-01," in output_file.read_text(encoding="utf-8")


class TestCliIndex:
    def test_prints_index(self):
        runner = CliRunner()
        result = runner.invoke(main, ["index", str(FIXTURES / "endpoints.json")])

        assert result.exit_code == 0
        assert result.output == (
            "## Index\n\n"
            "  *  [/version](#api-v0-version)\n"
            "  *  [/cat](#api-v0-cat)\n"
            "\n\n## Endpoints\n\n"
        )
