# simulator/turing_machine.py

from collections import namedtuple

from simulator.tape import Move, Tape


class ConfigurationError(ValueError):
    """Raised when a transition table cannot define a deterministic machine."""


Transition = namedtuple("Transition", ["state", "symbol", "new_state", "new_symbol", "move"])


class Snapshot:
    """Control state plus tape at one step of a run."""

    __slots__ = ("_state", "_tape")

    def __init__(self, state, tape):
        self._state = state
        self._tape = tape

    @property
    def state(self):
        return self._state

    @property
    def tape(self):
        return self._tape

    def render(self, blank="_"):
        return f"{self._state}: {self._tape.render(blank)}"

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._state == other._state and self._tape == other._tape

    def __hash__(self):
        return hash((self._state, self._tape))

    def __repr__(self):
        return f"Snapshot(state={self._state!r}, tape={self._tape})"


class TuringMachine:
    def __init__(self, start, accept, reject, transitions):
        if accept == reject:
            raise ConfigurationError(f"Accept and reject states must differ, both are '{accept}'")
        self._start = start
        self._accept = accept
        self._reject = reject
        self._transitions = {}
        for transition in transitions:
            transition = self._checked(transition)
            key = (transition.state, transition.symbol)
            if key in self._transitions:
                raise ConfigurationError(
                    f"Duplicate transition for state '{transition.state}' on symbol {transition.symbol!r}"
                )
            self._transitions[key] = transition

    @staticmethod
    def _checked(transition):
        try:
            transition = Transition(*transition)
        except TypeError:
            raise ConfigurationError(
                f"Transition {transition!r} must have 5 fields: state, symbol, new_state, new_symbol, move"
            ) from None
        for field in ("symbol", "new_symbol"):
            value = getattr(transition, field)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationError(f"Transition {field} must be a single character, got {value!r}")
        if not isinstance(transition.move, Move):
            raise ConfigurationError(f"Transition move must be a Move, got {transition.move!r}")
        return transition

    @property
    def start(self):
        return self._start

    @property
    def accept(self):
        return self._accept

    @property
    def reject(self):
        return self._reject

    @property
    def transitions(self):
        return list(self._transitions.values())

    @property
    def states(self):
        states = {self._start, self._accept, self._reject}
        for transition in self._transitions.values():
            states.add(transition.state)
            states.add(transition.new_state)
        return states

    def is_halting(self, state):
        return state == self._accept or state == self._reject

    def lookup(self, state, symbol):
        return self._transitions.get((state, symbol))

    def initial_snapshot(self, word):
        return Snapshot(self._start, Tape(word))

    def step(self, snapshot):
        """Next snapshot; a missing transition moves to the reject state with the tape untouched."""
        tape = snapshot.tape.copy()
        transition = self.lookup(snapshot.state, tape.current_symbol())
        if transition is None:
            return Snapshot(self._reject, tape)
        tape.apply(transition.new_symbol, transition.move)
        return Snapshot(transition.new_state, tape)

    def run(self, word):
        """Lazily yield every snapshot from the initial one up to and including a halting one."""
        snapshot = self.initial_snapshot(word)
        yield snapshot
        while not self.is_halting(snapshot.state):
            snapshot = self.step(snapshot)
            yield snapshot
