import argparse
import logging
import sys

from pmsh import __version__, colors
from pmsh.builtin import BuiltinResult, ShellState, execute_builtin
from pmsh.config import LOG_FORMAT, SHELL_NAME
from pmsh.exceptions import (
    HistoryIOError,
    HomeResolutionError,
    ProgramExitError,
    ProgramLaunchError,
)
from pmsh.executor import ProgramExecutor
from pmsh.history import HistoryManager
from pmsh.line_source import EventKind, ReadlineLineSource, ScriptLineSource
from pmsh.parser import parse_command
from pmsh.prompt import format_prompt

logger = logging.getLogger(__name__)


def report_error(message):
    """Print an error to stderr, in red on a terminal."""
    if colors.enabled(sys.stderr):
        message = colors.red(message)
    print(message, file=sys.stderr)


def load_history(history_mgr):
    try:
        return history_mgr.load()
    except HistoryIOError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)
        return []


def save_history(history_mgr, state):
    try:
        history_mgr.save(state.history)
    except HistoryIOError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def run_repl(line_source, history_mgr, executor, state=None, record_history=True):
    """
    Main shell loop.

    Reads lines until `exit` or end-of-input, running built-ins in-process
    and everything else through `executor`. Every command except `exit`
    is written to history before it runs, whether or not it succeeds.
    Returns the shell's exit status.
    """
    if state is None:
        state = ShellState(history=load_history(history_mgr))

    while True:
        try:
            if not run_once(line_source, history_mgr, executor, state, record_history):
                break
        except KeyboardInterrupt:
            # Ctrl+C outside of input or a child process: drop the command
            print("^C")

    return 0


def run_once(line_source, history_mgr, executor, state, record_history=True):
    """
    Read and run one line. Returns False once the shell should stop.
    """
    event = line_source.read_line(format_prompt())

    if event.kind is EventKind.INTERRUPT:
        return True
    if event.kind is EventKind.EOF:
        save_history(history_mgr, state)
        return False

    line = event.text
    command = parse_command(line)
    if command is None:
        return True
    line_source.add_history(line)

    if record_history and command.name != "exit":
        try:
            history_mgr.add_entry(line, state.history)
        except HistoryIOError as e:
            print(f"Warning: Could not save history: {e}", file=sys.stderr)

    result = execute_builtin(command, history_mgr, state)
    if result is BuiltinResult.HANDLED_EXIT:
        return False
    if result is BuiltinResult.HANDLED_CONTINUE:
        return True

    try:
        executor.execute(command)
    except (ProgramLaunchError, ProgramExitError) as e:
        report_error(f"{SHELL_NAME}: {e}")
    return True


def tolerate_undecodable_input():
    """
    Let bytes that are not valid UTF-8 through stdin/stdout as surrogate
    escapes instead of failing to decode.
    """
    for stream in (sys.stdin, sys.stdout):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog=SHELL_NAME, description="A small interactive shell."
    )
    parser.add_argument("script", nargs="?", help="run the commands in this file, one per line")
    parser.add_argument("--debug", action="store_true", help="log internal diagnostics to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    tolerate_undecodable_input()

    try:
        history_mgr = HistoryManager()
    except HomeResolutionError as e:
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
        return 1

    state = ShellState(history=load_history(history_mgr))
    executor = ProgramExecutor()

    if args.script:
        try:
            line_source = ScriptLineSource.from_file(args.script)
        except OSError as e:
            print(f"Error reading script {args.script}: {e}", file=sys.stderr)
            return 1
        logger.debug(f"Running script {args.script}")
        return run_repl(line_source, history_mgr, executor, state, record_history=False)

    return run_repl(ReadlineLineSource(state.history), history_mgr, executor, state)
