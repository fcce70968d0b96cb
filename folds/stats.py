from math import nan, sqrt
from random import Random
from func_prototypes import typed, returned
from folds.fold import Fold, par, post_map
from folds.common import Sum, Count
from folds.util import uncurry

@typed(int)
def _capacity(k):
    if k < 1:
        raise ValueError("Sample capacity must be at least 1, got %d" % k)
    return k

class Reservoir:
    __slots__ = ('items', 'seen')

    def __init__(self):
        self.items = []
        self.seen = 0

    def __repr__(self):
        return "<Reservoir seen=%d items=%r>" % (self.seen, self.items)


class Sample(Fold):
    """
    Uniform random sample of at most k elements, without replacement,
    from a stream of unknown length (Algorithm R).

    The first k elements fill the reservoir. After that the n-th element
    replaces a random slot with probability k/n. Every element of a stream of
    length n ends up in the sample with probability k/n.

    rng needs randint(a, b) with both ends inclusive, as random.Random has.
    One generator serves every step of every run; pass a seeded one for
    reproducible samples.
    """

    def __init__(self, k, rng=None):
        self.k = _capacity(k)
        self.rng = Random() if rng is None else rng

    def init(self):
        return Reservoir()

    def step(self, acc, x):
        acc.seen += 1
        if len(acc.items) < self.k:
            acc.items.append(x)
        else:
            j = self.rng.randint(1, acc.seen)
            if j <= self.k:
                acc.items[j - 1] = x
        return acc

    def output(self, acc):
        return acc.items


class Moments(Fold):
    """
    Mean, sample variance, skewness and kurtosis in a single pass.

    Uses the incremental central moment updates from
    https://web.archive.org/web/20140423031833/http://people.xiph.org/~tterribe/notes/homs.html
    Kurtosis is n * M4 / M2**2, not the excess kurtosis. Moments which are
    undefined for the data seen (variance of one element, skew of a constant
    stream) come out as nan.
    """

    def init(self):
        return (0, 0.0, 0.0, 0.0, 0.0)

    def step(self, acc, x):
        (n, mean, m2, m3, m4) = acc
        n1 = n
        n += 1
        delta = x - mean
        delta_n = delta / n
        delta_n2 = delta_n * delta_n
        term1 = delta * delta_n * n1
        mean += delta_n
        m4 += term1 * delta_n2 * (n * n - 3 * n + 3) + 6 * delta_n2 * m2 - 4 * delta_n * m3
        m3 += term1 * delta_n * (n - 2) - 3 * delta_n * m2
        m2 += term1
        return (n, mean, m2, m3, m4)

    def output(self, acc):
        (n, mean, m2, m3, m4) = acc
        if n == 0:
            return (nan, nan, nan, nan)
        variance = m2 / (n - 1) if n > 1 else nan
        if m2 > 0:
            skewness = sqrt(n) * m3 / m2 ** 1.5
            kurtosis = n * m4 / (m2 * m2)
        else:
            skewness = nan
            kurtosis = nan
        return (mean, variance, skewness, kurtosis)


def _ratio(total, n):
    if n == 0:
        return None
    return total / n

@returned(Fold)
def mean():
    """Arithmetic mean as a float, None for an empty stream."""
    return post_map(par(Sum(0.0), Count()), uncurry(_ratio))
