"""Start a new terminal in the working directory of the current one."""

from __future__ import annotations

import enum
import os
import subprocess
import sys
from typing import Sequence

__all__ = [
    "NewTermOption",
    "cwd_by_pid",
    "foreground_cwd",
    "choose_directory",
    "spawn_new_terminal",
]


class NewTermOption(enum.IntFlag):
    """Where the new terminal starts."""

    SHELL_CWD = 0         # working directory of the shell
    FG_CWD = 1 << 0       # working directory of the foreground process
    DISABLE_OSC7 = 1 << 1  # ignore directories reported with OSC 7


def cwd_by_pid(pid: int) -> str:
    """Path that resolves to the working directory of process ``pid``."""
    return f"/proc/{pid}/cwd"


def foreground_cwd(shell_pid: int, tty_fd: int) -> str:
    """Working directory of the foreground process on ``tty_fd``.

    The process with the highest PID in the foreground process group is
    taken as the active one; the shell is used when none is found.
    """
    try:
        pgid = os.tcgetpgrp(tty_fd)
    except OSError:
        pgid = -1
    fgpid = 0
    if pgid > 0:
        try:
            entries = os.listdir("/proc")
        except OSError:
            entries = []
        for name in entries:
            if not name.isdigit():
                continue
            epid = int(name)
            if epid <= fgpid:
                continue
            try:
                if os.getpgid(epid) == pgid:
                    fgpid = epid
            except OSError:
                continue
    return cwd_by_pid(fgpid if fgpid > 0 else shell_pid)


def _uses_osc7(options, osc7_cwd) -> bool:
    return not (NewTermOption(options) & NewTermOption.DISABLE_OSC7) and osc7_cwd is not None


def choose_directory(options, osc7_cwd, shell_pid, tty_fd) -> str:
    """Directory the new terminal should start in."""
    if _uses_osc7(options, osc7_cwd):
        return osc7_cwd
    if NewTermOption(options) & NewTermOption.FG_CWD:
        return foreground_cwd(shell_pid, tty_fd)
    return cwd_by_pid(shell_pid)


def spawn_new_terminal(
    argv: Sequence[str], options, osc7_cwd, shell_pid, tty_fd
) -> subprocess.Popen:
    """Start ``argv`` in a new session in the chosen directory.

    If the directory cannot be entered the terminal starts in the current
    one; for directories not reported with OSC 7 this is reported on stderr.
    """
    directory = choose_directory(options, osc7_cwd, shell_pid, tty_fd)
    env = dict(os.environ)
    cwd = directory if directory and os.path.isdir(directory) else None
    if _uses_osc7(options, osc7_cwd):
        if cwd is not None:
            # keep symlinked paths intact for the shell
            env["PWD"] = directory
    elif cwd is None:
        print(f"newterm failed to change directory to: {directory}", file=sys.stderr)
    return subprocess.Popen(list(argv), cwd=cwd, env=env, start_new_session=True)