"""Tests for the console entry point."""

from drone_helm.main import main


def test_main_succeeds(monkeypatch, capsys):
    monkeypatch.setenv("PLUGIN_HELM_COMMAND", "upgrade")

    assert main() == 0
    assert capsys.readouterr().out == ""


def test_main_writes_debug_line_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("PLUGIN_DEBUG", "true")
    monkeypatch.setenv("PLUGIN_KUBERNETES_TOKEN", "do-not-print")

    assert main() == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Generated config: {" in captured.err
    assert "do-not-print" not in captured.err


def test_main_fails_on_bad_value(monkeypatch, caplog):
    monkeypatch.setenv("PLUGIN_DRY_RUN", "perhaps")

    assert main() == 1
    assert "PLUGIN_DRY_RUN" in caplog.text
