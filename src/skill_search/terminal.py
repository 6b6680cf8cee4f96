"""Hand shell commands to a new terminal window, and open files with the desktop opener."""
import logging
import os
import shlex
import subprocess
import sys

logger = logging.getLogger(__name__)


class TerminalError(Exception):
    """No terminal could be launched for a command."""


def terminal_argv(command: str, platform: str = sys.platform, environ: dict | None = None) -> list[str]:
    """Build the argv that opens a terminal running ``command``."""
    if platform == "darwin":
        escaped = command.replace("\\", "\\\\").replace('"', '\\"')
        return ["osascript", "-e", f'tell application "Terminal" to do script "{escaped}"']

    env = os.environ if environ is None else environ
    terminal = env.get("TERMINAL") or "x-terminal-emulator"
    shell = env.get("SHELL") or "sh"
    # Keep the window open after the command finishes
    script = f"{command}; exec {shlex.quote(shell)}"
    return [*shlex.split(terminal), "-e", "sh", "-c", script]


def run_in_terminal(command: str, platform: str = sys.platform) -> None:
    argv = terminal_argv(command, platform=platform)
    logger.info("Launching terminal: %s", argv)
    try:
        subprocess.Popen(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        raise TerminalError(f"Could not launch {argv[0]}: {e}") from e


def opener_argv(path: str, platform: str = sys.platform) -> list[str]:
    if platform == "darwin":
        return ["open", path]
    return ["xdg-open", path]


def open_path(path: str, platform: str = sys.platform) -> None:
    """Open a file with the platform's default application."""
    argv = opener_argv(path, platform=platform)
    try:
        subprocess.Popen(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        raise TerminalError(f"Could not launch {argv[0]}: {e}") from e
