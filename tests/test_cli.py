"""
Tests for storeversion.cli module.

Tests the command-line interface including:
- 'check' output and exit codes
- 'compare' output
- Config and flag precedence
"""

from __future__ import annotations

import sys

import pytest
import requests_mock

from storeversion import cli


def _run(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["storeversion", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    return exc_info.value.code


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_test_dir, monkeypatch):
    """Run every CLI test where no storeversion.yaml exists."""
    monkeypatch.chdir(tmp_test_dir)


class TestCheckCommand:
    """Tests for 'storeversion check'."""

    def test_update_available(self, monkeypatch, capsys, lookup_payload):
        """Test output and exit code when a newer release exists."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/us/lookup", json=lookup_payload)
            code = _run(monkeypatch, "check", "com.example.app", "1.0.0")

        out = capsys.readouterr().out
        assert code == 0
        assert "App Name:          MyApp" in out
        assert "Available Version: 1.0.1" in out
        assert "Update:            patch" in out
        assert "Bug fixes" in out
        assert "[UPDATE]" in out

    def test_up_to_date(self, monkeypatch, capsys, lookup_payload):
        """Test that 'no new version' still exits 0."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/us/lookup", json=lookup_payload)
            code = _run(monkeypatch, "check", "com.example.app", "1.0.1")

        out = capsys.readouterr().out
        assert code == 0
        assert "Update:            none" in out
        assert "[UP TO DATE]" in out

    def test_country_and_timeout_flags(self, monkeypatch, lookup_payload):
        """Test that --country and --timeout reach the request."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/br/lookup", json=lookup_payload)
            code = _run(
                monkeypatch, "check", "com.example.app", "1.0.0",
                "--country", "br", "--timeout", "4",
            )

        assert code == 0
        assert m.last_request.timeout == 4.0

    def test_progress_steps_printed(self, monkeypatch, capsys, lookup_payload):
        """Test that the check reports its progress steps."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/us/lookup", json=lookup_payload)
            _run(monkeypatch, "check", "com.example.app", "1.0.0")

        out = capsys.readouterr().out
        assert "[1/2] Loading configuration..." in out
        assert "[2/2] Querying store lookup..." in out
        assert out.index("[1/2]") < out.index("[2/2]") < out.index("RELEASE CHECK RESULTS")

    @pytest.mark.parametrize("timeout", ["0", "-5", "nan", "soon"])
    def test_invalid_timeout_rejected(self, monkeypatch, capsys, timeout):
        """Test that a non-positive or non-numeric --timeout is a usage error."""
        with requests_mock.Mocker() as m:
            code = _run(
                monkeypatch, "check", "com.example.app", "1.0.0", f"--timeout={timeout}"
            )

        assert code == 2
        assert "--timeout" in capsys.readouterr().err
        assert not m.called

    def test_config_file_settings(self, monkeypatch, create_yaml_file, lookup_payload):
        """Test that settings from --config are used."""
        path = create_yaml_file(
            "settings.yaml", {"lookup": {"country": "jp", "timeout": 9}}
        )

        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/jp/lookup", json=lookup_payload)
            code = _run(monkeypatch, "check", "com.example.app", "1.0.0", "--config", str(path))

        assert code == 0
        assert m.last_request.timeout == 9

    def test_no_results_exits_1(self, monkeypatch, capsys):
        """Test that lookup failures print an error and exit 1."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/us/lookup", json={"resultCount": 0, "results": []})
            code = _run(monkeypatch, "check", "com.unknown.app", "1.0.0")

        assert code == 1
        assert "Error: No app results found" in capsys.readouterr().out

    def test_network_error_exits_1(self, monkeypatch, capsys):
        """Test that HTTP failures print an error and exit 1."""
        with requests_mock.Mocker() as m:
            m.get("https://itunes.apple.com/us/lookup", status_code=500)
            code = _run(monkeypatch, "check", "com.example.app", "1.0.0")

        assert code == 1
        assert "Error: Network error" in capsys.readouterr().out

    def test_bad_config_exits_1(self, monkeypatch, capsys, tmp_test_dir):
        """Test that configuration errors print an error and exit 1."""
        code = _run(
            monkeypatch, "check", "com.example.app", "1.0.0",
            "--config", str(tmp_test_dir / "missing.yaml"),
        )

        assert code == 1
        assert "file not found" in capsys.readouterr().out


class TestCompareCommand:
    """Tests for 'storeversion compare'."""

    @pytest.mark.parametrize(
        "current, available, expected",
        [("1.9", "1.10", "minor"), ("1", "2", "major"), ("1.0", "1.0.0", "none")],
    )
    def test_compare_output(self, monkeypatch, capsys, current, available, expected):
        """Test the printed outcome."""
        code = _run(monkeypatch, "compare", current, available)

        assert code == 0
        assert capsys.readouterr().out.strip() == expected
