import argparse
import logging
import sys

import requests

from simulator.commands.interpreter import run_commands
from simulator.utils.consts import DEFAULT_URL, LOG_FORMAT, REQUEST_TIMEOUT


def read_commands(path):
    """
    Read command lines from a file, or stdin when path is None or '-'.
    Blank lines are skipped; everything else is kept verbatim (minus the newline).
    """
    if path is None or path == "-":
        lines = sys.stdin.read().splitlines()
    else:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    return [line for line in lines if line.strip()]


def send_commands(url, commands, verbose=True):
    """
    Post the commands to a running simulator server and return its output lines.

    Args:
        url (str): Base URL of the server, e.g. 'http://localhost:5000'.
        commands (list): Command lines, sent verbatim.
        verbose (bool): Whether to keep ignored/rejected notices.
    """
    response = requests.post(
        f"{url.rstrip('/')}/commands",
        json={"commands": commands, "verbose": verbose},
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    return response.json()["output"]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run toy robot commands on a 5x5 table.")
    parser.add_argument("file", nargs="?", default=None,
                        help="File with one command per line (default: stdin).")
    parser.add_argument("--url", default=None,
                        help=f"Send the commands to a simulator server instead of running them locally, e.g. {DEFAULT_URL}")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print REPORT results, not ignored/rejected notices.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        commands = read_commands(args.file)
    except OSError as e:
        print(f"Error reading commands from {args.file}: {e}", file=sys.stderr)
        return 1

    if args.url:
        try:
            output = send_commands(args.url, commands, verbose=not args.quiet)
        except requests.RequestException as e:
            print(f"Error talking to simulator server at {args.url}: {e}", file=sys.stderr)
            return 1
    else:
        output = run_commands(commands, verbose=not args.quiet)

    for line in output:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())

# --- How to Run This Script ---
#
#   python3 simulate.py commands.txt
#   printf 'PLACE 0,0,NORTH\nMOVE\nREPORT\n' | python3 simulate.py
#
# Against a running server (python3 main.py):
#
#   python3 simulate.py commands.txt --url http://localhost:5000
