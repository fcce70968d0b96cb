import collections.abc
from copy import deepcopy
from typing import TypeVar, Callable, Generic, Hashable, Iterable, Iterator
from func_prototypes import typed, returned

A = TypeVar("A")
B = TypeVar("B")
M = TypeVar("M")
A2 = TypeVar("A2")
B2 = TypeVar("B2")
K = TypeVar("K")

class Fold(Generic[A, B, M]):
    """
    A reusable description of a single pass reduction.

    A is the element type consumed, B the result type produced and M the
    private state threaded through a run:

        acc = fold.init()
        for x in xs:
            acc = fold.step(acc, x)
        result = fold.output(acc)

    A Fold holds no run state, so one value can drive any number of runs.
    step may mutate acc, and always returns the state to use for the next
    call. output is called once per run; stepping a state after output has
    seen it is undefined.
    """

    def init(self) -> M:
        raise NotImplementedError()

    def step(self, acc: M, x: A) -> M:
        raise NotImplementedError()

    def output(self, acc: M) -> B:
        raise NotImplementedError()

    def step_chunk(self, acc: M, xs: Iterable[A]) -> M:
        for x in xs:
            acc = self.step(acc, x)
        return acc

    def pre_map(self, fn):
        return pre_map(self, fn)

    def post_map(self, fn):
        return post_map(self, fn)

    def filter(self, pred):
        return filter(self, pred)

    def par(self, other):
        return par(self, other)

    def group_by(self, key):
        return group_by(self, key)

    def then(self, other):
        return then(self, other)

    def batched(self):
        return batched(self)

    def many(self, n):
        return many(self, n)


class PreMap(Fold[A2, B, M], Generic[A2, A, B, M]):
    """Apply fn to every element before the inner fold sees it."""

    def __init__(self, inner: Fold[A, B, M], fn: Callable[[A2], A]):
        self.inner = inner
        self.fn = fn

    def init(self):
        return self.inner.init()

    def step(self, acc, x):
        return self.inner.step(acc, self.fn(x))

    def output(self, acc):
        return self.inner.output(acc)


class PostMap(Fold[A, B2, M], Generic[A, B, B2, M]):
    """Apply fn to the result of the inner fold."""

    def __init__(self, inner: Fold[A, B, M], fn: Callable[[B], B2]):
        self.inner = inner
        self.fn = fn

    def init(self):
        return self.inner.init()

    def step(self, acc, x):
        return self.inner.step(acc, x)

    def step_chunk(self, acc, xs):
        return self.inner.step_chunk(acc, xs)

    def output(self, acc):
        return self.fn(self.inner.output(acc))


class Filtered(Fold[A, B, M]):
    """Only hand the inner fold elements for which pred is true."""

    def __init__(self, inner: Fold[A, B, M], pred: Callable[[A], bool]):
        self.inner = inner
        self.pred = pred

    def init(self):
        return self.inner.init()

    def step(self, acc, x):
        if self.pred(x):
            return self.inner.step(acc, x)
        return acc

    def step_chunk(self, acc, xs):
        pred = self.pred
        return self.inner.step_chunk(acc, [x for x in xs if pred(x)])

    def output(self, acc):
        return self.inner.output(acc)


class Par(Fold):
    """
    Run two folds side by side over the same elements.
    State and output are pairs. Elements are handed to both folds as is,
    so neither fold may mutate them.
    """

    def __init__(self, f1: Fold, f2: Fold):
        self.f1 = f1
        self.f2 = f2

    def init(self):
        return (self.f1.init(), self.f2.init())

    def step(self, acc, x):
        (m1, m2) = acc
        return (self.f1.step(m1, x), self.f2.step(m2, x))

    def step_chunk(self, acc, xs):
        (m1, m2) = acc
        xs = list(xs)
        return (self.f1.step_chunk(m1, xs), self.f2.step_chunk(m2, xs))

    def output(self, acc):
        (m1, m2) = acc
        return (self.f1.output(m1), self.f2.output(m2))


class Grouped(Fold):
    """
    Fold each group of elements sharing key(x) separately.
    State grows with the number of distinct keys, not with the input.
    """

    def __init__(self, inner: Fold, key: Callable[[A], Hashable]):
        self.inner = inner
        self.key = key

    def init(self):
        return {}

    def step(self, acc, x):
        k = self.key(x)
        if k in acc:
            m = acc[k]
        else:
            m = self.inner.init()
        acc[k] = self.inner.step(m, x)
        return acc

    def output(self, acc):
        return {k: self.inner.output(m) for (k, m) in acc.items()}


class Composed(Fold):
    """
    Fold second over the running outputs of first.
    Each running output is a deep copy, so second may keep it while first
    goes on mutating its own state.
    """

    def __init__(self, first: Fold, second: Fold):
        self.first = first
        self.second = second

    def init(self):
        return (self.first.init(), self.second.init())

    def step(self, acc, x):
        (m1, m2) = acc
        m1 = self.first.step(m1, x)
        return (m1, self.second.step(m2, deepcopy(self.first.output(m1))))

    def output(self, acc):
        (_m1, m2) = acc
        return self.second.output(m2)


class Batched(Fold):
    """Elements arrive in chunks, each chunk is handed to step_chunk."""

    def __init__(self, inner: Fold):
        self.inner = inner

    def init(self):
        return self.inner.init()

    def step(self, acc, xs):
        return self.inner.step_chunk(acc, xs)

    def output(self, acc):
        return self.inner.output(acc)


class Many(Fold):
    """Fold every column of fixed width rows with its own copy of inner."""

    def __init__(self, inner: Fold, n: int):
        self.inner = inner
        self.n = n

    def init(self):
        return [self.inner.init() for _ in range(self.n)]

    def step(self, acc, row):
        row = list(row)
        if len(row) != self.n:
            raise ValueError("Expected row of width %d, got %d" % (self.n, len(row)))
        for (i, x) in enumerate(row):
            acc[i] = self.inner.step(acc[i], x)
        return acc

    def output(self, acc):
        return [self.inner.output(m) for m in acc]


@returned(Fold)
@typed(Fold, collections.abc.Callable)
def pre_map(fold, fn):
    return PreMap(fold, fn)

@returned(Fold)
@typed(Fold, collections.abc.Callable)
def post_map(fold, fn):
    return PostMap(fold, fn)

@returned(Fold)
@typed(Fold, collections.abc.Callable)
def filter(fold, pred):
    return Filtered(fold, pred)

@returned(Fold)
@typed(Fold, Fold)
def par2(f1, f2):
    return Par(f1, f2)

def par(*folds):
    """
    par(f, g) folds f and g in one pass, producing (f_out, g_out).
    More folds nest to the right: par(f, g, h) is par(f, par(g, h)).
    """
    if len(folds) < 2:
        raise ValueError("par needs at least two folds, got %d" % len(folds))
    (head, rest) = (folds[0], folds[1:])
    if len(rest) == 1:
        return par2(head, rest[0])
    return par2(head, par(*rest))

@returned(Fold)
@typed(Fold, collections.abc.Callable)
def group_by(fold, key):
    return Grouped(fold, key)

@returned(Fold)
@typed(Fold, Fold)
def then(first, second):
    return Composed(first, second)

@returned(Fold)
@typed(Fold)
def batched(fold):
    return Batched(fold)

@returned(Fold)
@typed(Fold, int)
def many(fold, n):
    if n < 1:
        raise ValueError("many needs at least one column, got %d" % n)
    return Many(fold, n)


def run_fold(fold: Fold[A, B, M], xs: Iterable[A]) -> B:
    """
    Drive fold over xs: one init, one step per element in order, one output.
    xs may be any iterable, including an unbounded generator which the caller
    truncates.
    """
    acc = fold.init()
    step = fold.step
    for x in xs:
        acc = step(acc, x)
    return fold.output(acc)

def scan(fold: Fold[A, B, M], xs: Iterable[A]) -> Iterator[B]:
    """
    Yield a deep copy of the output after every step, so earlier results
    stay as they were while the state keeps changing. Requires fold.output
    to leave the state usable. Filtered elements still yield, so the result
    is as long as xs.
    """
    acc = fold.init()
    for x in xs:
        acc = fold.step(acc, x)
        yield deepcopy(fold.output(acc))
