import logging

import pytest

from beast_escape.cli import EXIT_INVALID, EXIT_OK, EXIT_TRAPPED, main
from beast_escape.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _isolated(restore_root_logging, monkeypatch):
    monkeypatch.delenv("BEAST_ESCAPE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BEAST_ESCAPE_WORKERS", raising=False)


def test_run_prints_summary(capsys):
    assert main(["run"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Passed all 30 tests!" in out
    assert "FAIL:" not in out


def test_run_reports_failures_but_exits_zero(tmp_path, capsys):
    corpus = tmp_path / "corpus.yaml"
    corpus.write_text(
        "scenarios:\n  - name: off-by-one\n    layout: 'E     H              B'\n    trap_beast: 8\n    wary_beast: 7\n",
        encoding="utf-8",
    )
    assert main(["run", "--corpus", str(corpus), "--workers", "2", "--no-validate"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "FAIL: off-by-one [trap-stepping beast]" in out
    assert "1 of 2 tests failed" in out


def test_run_with_broken_corpus(tmp_path):
    corpus = tmp_path / "corpus.yaml"
    corpus.write_text("scenarios: nope\n", encoding="utf-8")
    assert main(["run", "--corpus", str(corpus)]) == EXIT_INVALID


def test_solve_prints_route(tmp_path, capsys):
    layout = tmp_path / "layout.txt"
    layout.write_text("E     H              B\n", encoding="utf-8")

    assert main(["solve", str(layout)]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Escape in 6 moves" in out
    assert "E.....H              B" in out


def test_solve_trapped_and_invalid(tmp_path, capsys):
    trapped = tmp_path / "trapped.txt"
    trapped.write_text("E  W  H              B", encoding="utf-8")
    assert main(["solve", "--beast-avoids-traps", str(trapped)]) == EXIT_TRAPPED
    assert "No escape route" in capsys.readouterr().out

    invalid = tmp_path / "invalid.txt"
    invalid.write_text("E  X  H              B", encoding="utf-8")
    assert main(["solve", str(invalid)]) == EXIT_INVALID


def test_debug_flag_sets_root_level(tmp_path):
    layout = tmp_path / "layout.txt"
    layout.write_text("E H    B", encoding="utf-8")
    main(["--debug", "solve", str(layout)])
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_single_handler(monkeypatch):
    configure_logging(logging.WARNING)
    configure_logging(logging.WARNING)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING

    monkeypatch.setenv("BEAST_ESCAPE_LOG_LEVEL", "error")
    configure_logging()
    assert root.level == logging.ERROR


def test_settings_loading_is_logged(tmp_path, capsys):
    layout = tmp_path / "layout.txt"
    layout.write_text("E H    B", encoding="utf-8")
    user = tmp_path / "user.yaml"
    user.write_text("runner:\n  workers: 2\n", encoding="utf-8")

    main(["--settings", str(tmp_path / "missing.yaml"), "solve", str(layout)])
    captured = capsys.readouterr()
    assert "WARNING  | beast_escape.settings: User settings file not found" in captured.out
    assert "not found" not in captured.err

    main(["--settings", str(user), "solve", str(layout)])
    assert "Loaded user settings from" in capsys.readouterr().out


def test_settings_level_applies_after_early_setup(tmp_path):
    layout = tmp_path / "layout.txt"
    layout.write_text("E H    B", encoding="utf-8")
    user = tmp_path / "user.yaml"
    user.write_text("logging:\n  level: warning\n", encoding="utf-8")

    main(["--settings", str(user), "solve", str(layout)])
    assert logging.getLogger().level == logging.WARNING
