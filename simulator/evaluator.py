# simulator/evaluator.py

from itertools import islice

from simulator.tape import BLANK

ACCEPT = "accept"
REJECT = "reject"
UNDECIDED = "undecided"


class RunResult:
    def __init__(self, word, verdict, steps, final):
        self.word = word
        self.verdict = verdict
        self.steps = steps
        self.final = final

    @property
    def halted(self):
        return self.verdict != UNDECIDED

    def to_entry(self, blank="_"):
        """Flatten into a JSON-serialisable log entry."""
        tape = self.final.tape
        return {
            "word": self.word,
            "verdict": self.verdict,
            "steps": self.steps,
            "state": self.final.state,
            "tape": "".join(blank if cell == BLANK else cell for cell in tape.logical_content()),
            "head": tape.logical_head_offset(),
        }

    def __repr__(self):
        return f"RunResult(word={self.word!r}, verdict={self.verdict!r}, steps={self.steps})"


def bounded_run(machine, word, max_steps=None):
    """
    Snapshots of machine.run(word), cut off after max_steps transitions.
    max_steps of None or 0 leaves the run unbounded.
    """
    snapshots = machine.run(word)
    if not max_steps:
        return snapshots
    return islice(snapshots, max_steps + 1)


def verdict(machine, snapshot):
    if snapshot.state == machine.accept:
        return ACCEPT
    if snapshot.state == machine.reject:
        return REJECT
    return UNDECIDED


def evaluate(machine, word, max_steps=None):
    final = None
    count = 0
    for final in bounded_run(machine, word, max_steps):
        count += 1
    return RunResult(word, verdict(machine, final), count - 1, final)


def evaluate_words(machine, words, max_steps=None):
    for word in words:
        yield word, evaluate(machine, word, max_steps)
