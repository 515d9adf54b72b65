# tools/machine_parser.py

import re
from pathlib import Path

from simulator.tape import BLANK, Move
from simulator.turing_machine import Transition, TuringMachine

TRANSITION_PATTERN = re.compile(r"(\S+)\s+(\S+)\s*->\s*(\S+)\s+(\S+)\s+([><^])")
HEADER_KEYS = ("start", "accept", "reject", "blank")


class MachineDescriptionError(ValueError):
    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class MachineDescription:
    """Everything needed to build a machine, plus the blank used for display."""

    def __init__(self, start, accept, reject, blank, transitions):
        self.start = start
        self.accept = accept
        self.reject = reject
        self.blank = blank
        self.transitions = list(transitions)

    def to_display(self, symbol):
        return self.blank if symbol == BLANK else symbol

    def internal_word(self, word):
        """Input word with the presentation blank replaced by the internal marker."""
        return word.replace(self.blank, BLANK)

    def __repr__(self):
        return (
            f"MachineDescription(start={self.start!r}, accept={self.accept!r}, "
            f"reject={self.reject!r}, blank={self.blank!r}, transitions={len(self.transitions)})"
        )


def parse_machine_text(text):
    header = {}
    raw_transitions = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, value = stripped.partition(":")
        if sep and key in HEADER_KEYS and value.strip():
            value = value.strip()
            header[key] = value[-1] if key == "blank" else value.split()[-1]
            continue

        match = TRANSITION_PATTERN.fullmatch(stripped)
        if match is None:
            raise MachineDescriptionError(f"cannot parse '{stripped}'", line_number)
        state, symbol, new_state, new_symbol, move = match.groups()
        raw_transitions.append((state, symbol[-1], new_state, new_symbol[-1], Move.from_symbol(move)))

    missing = [key for key in HEADER_KEYS if key not in header]
    if missing:
        raise MachineDescriptionError(f"missing required field(s): {', '.join(missing)}")

    blank = header["blank"]
    # The file spells the blank with its presentation symbol; the core uses BLANK.
    transitions = [
        Transition(
            state,
            BLANK if symbol == blank else symbol,
            new_state,
            BLANK if new_symbol == blank else new_symbol,
            move,
        )
        for state, symbol, new_state, new_symbol, move in raw_transitions
    ]
    return MachineDescription(header["start"], header["accept"], header["reject"], blank, transitions)


def load_machine_description(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Machine description not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_machine_text(f.read())


def load_input_word(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read().strip()


def build_machine(description):
    return TuringMachine(
        start=description.start,
        accept=description.accept,
        reject=description.reject,
        transitions=description.transitions,
    )
