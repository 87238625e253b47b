#!/usr/bin/env python3
"""
Name: sleep
Description: suspend execution for a number of seconds

A stand-in for the 'sleep' utility used by process supervision tests.

Takes exactly one argument, a positive whole number of seconds, and blocks
for that long before exiting successfully. Anything else prints a usage
line to stderr and exits with failure.
"""
import os
import re
import sys
import time

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

__version__ = "1.0"

def usage(program_name):
    """Prints a usage message to stderr and exits with failure."""
    print(f"Usage: {program_name} SECS", file=sys.stderr)
    sys.exit(EXIT_FAILURE)

def get_seconds(args, program_name):
    """
    Returns the sleep duration named by the argument list.
    Exits through usage() unless args is a single positive integer.
    """
    if len(args) != 1:
        usage(program_name)

    seconds_str = args[0]

    # Base-10 only: no whitespace, fractions or non-ASCII digits.
    if not re.fullmatch(r'[+-]?[0-9]+', seconds_str):
        usage(program_name)

    try:
        seconds = int(seconds_str)
    except ValueError:
        # Past the interpreter's integer string conversion limit.
        usage(program_name)
    if seconds <= 0:
        usage(program_name)
    return seconds

def main():
    """Validates arguments and sleeps for the specified duration."""
    program_name = os.path.basename(sys.argv[0])
    seconds = get_seconds(sys.argv[1:], program_name)

    try:
        time.sleep(seconds)
    except OverflowError:
        # Longer than the platform clock can represent.
        usage(program_name)

    sys.exit(EXIT_SUCCESS)

if __name__ == "__main__":
    main()
