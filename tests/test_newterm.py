import os
from unittest import mock

from stkit.newterm import (
    NewTermOption,
    choose_directory,
    cwd_by_pid,
    foreground_cwd,
    spawn_new_terminal,
)


def test_cwd_by_pid_format():
    assert cwd_by_pid(123) == "/proc/123/cwd"


def test_combined_options_skip_osc7():
    options = NewTermOption.FG_CWD | NewTermOption.DISABLE_OSC7
    assert choose_directory(options, "/srv/work", 42, -1) == cwd_by_pid(42)


def test_foreground_cwd_falls_back_to_shell():
    assert foreground_cwd(os.getpid(), -1) == cwd_by_pid(os.getpid())


def test_choose_directory_prefers_osc7():
    assert choose_directory(NewTermOption.SHELL_CWD, "/srv/work", 42, -1) == "/srv/work"


def test_choose_directory_osc7_disabled():
    options = NewTermOption.DISABLE_OSC7
    assert choose_directory(options, "/srv/work", 42, -1) == cwd_by_pid(42)


def test_choose_directory_without_osc7():
    assert choose_directory(NewTermOption.SHELL_CWD, None, 42, -1) == cwd_by_pid(42)
    assert choose_directory(NewTermOption.FG_CWD, None, 42, -1) == cwd_by_pid(42)


def test_spawn_uses_osc7_directory(tmp_path):
    with mock.patch("stkit.newterm.subprocess.Popen") as popen:
        spawn_new_terminal(["term"], NewTermOption.SHELL_CWD, str(tmp_path), 1, -1)
    kwargs = popen.call_args.kwargs
    assert popen.call_args.args[0] == ["term"]
    assert kwargs["cwd"] == str(tmp_path)
    assert kwargs["env"]["PWD"] == str(tmp_path)
    assert kwargs["start_new_session"] is True


def test_spawn_reports_missing_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    nonexistent_pid = 99999999
    with mock.patch("stkit.newterm.subprocess.Popen") as popen:
        spawn_new_terminal(
            ["term"], NewTermOption.DISABLE_OSC7, str(missing), nonexistent_pid, -1
        )
    assert popen.call_args.kwargs["cwd"] is None
    expected = "newterm failed to change directory to: /proc/99999999/cwd"
    assert expected in capsys.readouterr().err


def test_spawn_silent_for_bad_osc7_directory(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    with mock.patch("stkit.newterm.subprocess.Popen") as popen:
        spawn_new_terminal(["term"], NewTermOption.SHELL_CWD, missing, 1, -1)
    assert popen.call_args.kwargs["cwd"] is None
    assert "PWD" not in popen.call_args.kwargs["env"] or popen.call_args.kwargs["env"]["PWD"] != missing
    assert capsys.readouterr().err == ""