from functools import reduce
from operator import add
from folds.fold import Fold
from folds.util import identity

# Marks a state which has not seen an element yet. Elements may be None.
_EMPTY = object()

class Sum(Fold):
    """Running total. zero is the result of an empty run."""

    def __init__(self, zero=0):
        self.zero = zero

    def init(self):
        return self.zero

    def step(self, acc, x):
        return acc + x

    def step_chunk(self, acc, xs):
        return reduce(add, xs, acc)

    def output(self, acc):
        return acc


class Count(Fold):
    """Number of elements seen, whatever their value."""

    def init(self):
        return 0

    def step(self, acc, x):
        return acc + 1

    def step_chunk(self, acc, xs):
        return acc + sum(1 for _ in xs)

    def output(self, acc):
        return acc


class Min(Fold):
    """
    Smallest element by key, None if no element was seen.
    Ties keep the element seen first.
    """

    def __init__(self, key=identity):
        self.key = key

    def init(self):
        return _EMPTY

    def step(self, acc, x):
        if acc is _EMPTY or self.key(x) < self.key(acc):
            return x
        return acc

    def output(self, acc):
        return None if acc is _EMPTY else acc


class Max(Fold):
    """
    Largest element by key, None if no element was seen.
    Ties keep the element seen first.
    """

    def __init__(self, key=identity):
        self.key = key

    def init(self):
        return _EMPTY

    def step(self, acc, x):
        if acc is _EMPTY or self.key(x) > self.key(acc):
            return x
        return acc

    def output(self, acc):
        return None if acc is _EMPTY else acc


class First(Fold):

    def init(self):
        return _EMPTY

    def step(self, acc, x):
        return x if acc is _EMPTY else acc

    def output(self, acc):
        return None if acc is _EMPTY else acc


class Last(Fold):

    def init(self):
        return _EMPTY

    def step(self, acc, x):
        return x

    def output(self, acc):
        return None if acc is _EMPTY else acc


class Collect(Fold):
    """
    Every element, in order.
    Memory grows with the input, so this does not belong on an unbounded
    stream. Use stats.Sample to keep a bounded view instead.
    """

    def init(self):
        return []

    def step(self, acc, x):
        acc.append(x)
        return acc

    def step_chunk(self, acc, xs):
        acc.extend(xs)
        return acc

    def output(self, acc):
        return acc


SUM = Sum()
COUNT = Count()
MIN = Min()
MAX = Max()
FIRST = First()
LAST = Last()
