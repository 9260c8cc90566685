from __future__ import annotations

import argparse
import sys

USAGE_EXIT = 1


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage problems with exit status 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT, f"{self.prog}: error: {message}\n")


def fail(message: str) -> int:
    print(message, file=sys.stderr)
    return USAGE_EXIT
