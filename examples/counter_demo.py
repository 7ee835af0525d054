#!/usr/bin/env python3
"""
Counter Demo Script

This script builds a few small state programs and runs them, printing the
result and final state of each.
"""

import logging
import sys

try:
    from statesharp import (
        eval_state,
        exec_state,
        get,
        gets,
        lift,
        modify,
        put,
        run_state,
        traced,
        traverse,
    )
except ImportError:
    print("ERROR: statesharp package not found or incompletely installed.")
    print("Please ensure statesharp is installed properly with: pip install -e .")
    sys.exit(1)


def counter_demo():
    """Increment a counter twice and read it back."""
    program = (
        traced("first", modify(lambda n: n + 1))
        >> (lambda _: traced("second", modify(lambda n: n + 1)))
        >> (lambda _: get())
    )
    print(f"eval_state: {eval_state(program, 0)}")
    print(f"exec_state: {exec_state(program, 0)}")


def put_gets_demo():
    """Write a state and read a value derived from it."""
    program = put(10) >> (lambda _: gets(lambda x: x * 2))
    value, state = run_state(program, 0)
    print(f"value={value} state={state}")


def labelling_demo():
    """Number a list of words using the state as the next free label."""

    def label(word):
        return get() >> (lambda n: put(n + 1) >> (lambda _: lift(f"{n}:{word}")))

    labels, next_label = run_state(traverse(label, ["ace", "king", "queen"]), 1)
    print(f"labels={labels} next={next_label}")


def main():
    """Main function to run all demos."""
    logging.basicConfig(
        level=logging.DEBUG, format="%(asctime)s - %(name)s - %(message)s"
    )

    counter_demo()
    put_gets_demo()
    labelling_demo()


if __name__ == "__main__":
    main()
