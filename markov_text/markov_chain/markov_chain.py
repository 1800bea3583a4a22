from collections.abc import Mapping
import logging
import random

logger = logging.getLogger(__name__)


class SampleError(ValueError):
    """Base class for samples that cannot be turned into a transition table."""


class EmptySampleError(SampleError):
    pass


class InvalidOrderError(SampleError):
    pass


def validate_sample(sample, order):
    """
    Rejects input that cannot produce a non-degenerate table.
    The empty sample is checked first, since every order is invalid for it.
    """
    if not isinstance(sample, (str, bytes)):
        raise TypeError(f"Sample must be str or bytes, got {type(sample).__name__}")
    if len(sample) == 0:
        raise EmptySampleError("Sample text is empty.")
    if isinstance(order, bool) or not isinstance(order, int):
        raise InvalidOrderError(f"Order must be an integer, got {order!r}")
    if order < 1 or order >= len(sample):
        raise InvalidOrderError(
            f"Order must satisfy 1 <= order < {len(sample)} (the sample length), got {order}"
        )


class TransitionTable(Mapping):
    """
    Read-only mapping from a grouping to the tuple of groupings observed to follow it.
    Duplicates are kept so that a uniform pick over the tuple follows the
    empirical frequencies. Keys iterate in the order they were first seen.
    """
    def __init__(self, transitions):
        self._transitions = {state: tuple(next_states) for state, next_states in transitions.items()}

    def __getitem__(self, state):
        return self._transitions[state]

    def __iter__(self):
        return iter(self._transitions)

    def __len__(self):
        return len(self._transitions)

    def __repr__(self):
        return f"TransitionTable({self._transitions!r})"

    def successors(self, state):
        # Unknown states behave like dead ends
        return self._transitions.get(state, ())

    @property
    def states(self):
        return tuple(self._transitions)


def build_table(sample, order):
    validate_sample(sample, order)

    transitions = {}
    for i in range(order, len(sample)):
        state = sample[i - order:i]
        # Shorter than `order` only for the trailing windows of the sample
        next_state = sample[i:i + order]
        transitions.setdefault(state, []).append(next_state)
        # Every successor must be usable as a future source state
        transitions.setdefault(next_state, [])

    return TransitionTable(transitions)


def generate_text(table, sample, order, target_length, rng=None, start=None):
    """
    Random walk over `table` until at least `target_length` units are emitted.

    Whole groupings are emitted, so the result may overshoot the target by up to
    `order - 1` units. The walk starts at a random full-width window of `sample`
    unless `start` is given, which must be a key of `table`. A state with no
    successors jumps to a uniformly random key of the table instead of ending
    the walk.
    """
    validate_sample(sample, order)
    if target_length < 0:
        raise ValueError(f"Target length must be non-negative, got {target_length}")
    if rng is None:
        rng = random.Random()

    if start is None:
        offset = rng.randrange(len(sample) - order + 1)
        current_state = sample[offset:offset + order]
    else:
        if start not in table:
            raise ValueError(f"Start state {start!r} is not a state of the table")
        current_state = start

    # Lazily created, only needed once a dead end is hit
    keys = None
    pieces = []
    emitted = 0
    while emitted < target_length:
        pieces.append(current_state)
        emitted += len(current_state)
        if emitted >= target_length:
            break

        next_states = table.successors(current_state)
        if next_states:
            current_state = next_states[rng.randrange(len(next_states))]
        else:
            if keys is None:
                keys = list(table)
            current_state = keys[rng.randrange(len(keys))]
            logger.debug("Dead end reached, jumping to random state %r", current_state)

    # sample[:0] is '' or b'' so the result keeps the type of the sample
    return sample[:0].join(pieces)


class MarkovChain:
    def __init__(self, order=1):
        self.order = order
        self.sample = None
        self.table = None

    def train(self, sample):
        self.table = build_table(sample, self.order)
        self.sample = sample
        return self

    def generate(self, length=16, rng=None, start=None):
        if self.table is None:
            raise ValueError("Model is empty. Train first.")
        return generate_text(self.table, self.sample, self.order, length, rng=rng, start=start)
