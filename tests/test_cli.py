from __future__ import annotations

import argparse
from pathlib import Path
from sys import executable

import pytest

from loading_screen.cli import app, dispatch, parse_args, run
from loading_screen.cli.commands import demo, run as run_command


def _quick_renderer() -> None:
    return None


@pytest.fixture
def quick_renderer(monkeypatch: pytest.MonkeyPatch) -> None:
    """Swap built-in renderers for one that returns immediately."""
    monkeypatch.setattr(demo, "get_renderer", lambda name: _quick_renderer)
    monkeypatch.setattr(run_command, "get_renderer", lambda name: _quick_renderer)


def test_parse_args_demo_defaults() -> None:
    args = parse_args(["demo"])
    assert args.command == "demo"
    assert args.seconds == 3.0
    assert args.renderer == "donut"
    assert args.use_async is False
    assert args.log_file is None


def test_parse_args_run_collects_remainder() -> None:
    args = parse_args(
        ["--log-file", "out.log", "run", "--async", "-r", "spinner", "--", "ls", "-la"]
    )
    assert args.command == "run"
    assert args.use_async is True
    assert args.renderer == "spinner"
    assert args.log_file == Path("out.log")
    assert [part for part in args.cmd if part != "--"] == ["ls", "-la"]


def test_parse_args_rejects_non_numeric_seconds() -> None:
    with pytest.raises(SystemExit):
        _ = parse_args(["demo", "--seconds", "soon"])


def test_dispatch_without_command_prints_help(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = dispatch(argparse.Namespace(command=None))

    assert code == 1
    assert "usage:" in capsys.readouterr().out


def test_run_passes_log_file_to_logging_setup(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    seen: list[Path | None] = []
    monkeypatch.setattr(app, "dispatch", lambda args: 0)

    code = run(
        ["--log-file", str(tmp_path / "debug.log"), "demo"],
        configure_logging=seen.append,
    )

    assert code == 0
    assert seen == [tmp_path / "debug.log"]


@pytest.mark.parametrize("use_async", [False, True])
def test_demo_sleeps_under_loading_screen(
    quick_renderer: None, capsys: pytest.CaptureFixture[str], use_async: bool
) -> None:
    argv = ["demo", "--seconds", "0.01"] + (["--async"] if use_async else [])

    code = dispatch(parse_args(argv))

    assert code == 0
    assert "Done after 0.01s" in capsys.readouterr().out


def test_demo_unknown_renderer_exits_with_usage_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = dispatch(parse_args(["demo", "--renderer", "fireworks", "-s", "0"]))

    assert code == 2
    assert "Unknown renderer 'fireworks'" in capsys.readouterr().err


@pytest.mark.parametrize("use_async", [False, True])
def test_run_echoes_command_output(
    quick_renderer: None, capsys: pytest.CaptureFixture[str], use_async: bool
) -> None:
    argv = ["run"] + (["--async"] if use_async else [])
    argv += ["--", executable, "-c", "print('ok')"]

    code = dispatch(parse_args(argv))

    assert code == 0
    assert "ok" in capsys.readouterr().out


def test_run_returns_command_exit_code(
    quick_renderer: None, capsys: pytest.CaptureFixture[str]
) -> None:
    code = dispatch(
        parse_args(
            [
                "run",
                "--",
                executable,
                "-c",
                "import sys; sys.stderr.write('bad\\n'); sys.exit(3)",
            ]
        )
    )

    assert code == 3
    assert "bad" in capsys.readouterr().err


def test_run_missing_executable_returns_127(
    quick_renderer: None, capsys: pytest.CaptureFixture[str]
) -> None:
    code = dispatch(parse_args(["run", "--", "definitely-not-a-real-command-xyz"]))

    assert code == run_command.COMMAND_NOT_FOUND_EXIT_CODE
    assert "Error:" in capsys.readouterr().err


def test_run_without_command_is_usage_error(
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = dispatch(parse_args(["run"]))

    assert code == 2
    assert "No command given" in capsys.readouterr().err
