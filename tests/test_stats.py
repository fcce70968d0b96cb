import pytest
from math import isnan
from random import Random
from folds.fold import run_fold, par, filter
from folds.common import SUM, COUNT
from folds.stats import Sample, Reservoir, Moments, mean

class ScriptedRng:
    """Hands out prepared draws and records the ranges asked for."""
    def __init__(self, draws):
        self.draws = list(draws)
        self.ranges = []

    def randint(self, a, b):
        self.ranges.append((a, b))
        j = self.draws.pop(0)
        assert a <= j <= b
        return j

class ForbiddenRng:
    def randint(self, a, b):
        raise AssertionError("no draw expected, asked for [%d, %d]" % (a, b))

def test_sample_capacity():
    with pytest.raises(ValueError):
        Sample(0)
    with pytest.raises(ValueError):
        Sample(-3)
    assert Sample(1).k == 1

def test_sample_size():
    rng = Random(1234)
    for k in range(1, 6):
        fld = Sample(k, rng)
        for n in range(0, 13):
            assert len(run_fold(fld, range(n))) == min(k, n)

def test_sample_filling_phase():
    assert run_fold(Sample(5, ForbiddenRng()), [1, 2, 3]) == [1, 2, 3]
    assert run_fold(Sample(5, ForbiddenRng()), []) == []

def test_sample_kth_element_is_kept():
    assert run_fold(Sample(3, ForbiddenRng()), ["a", "b", "c"]) == ["a", "b", "c"]

def test_sample_draw_ranges():
    rng = ScriptedRng([2, 4])
    assert run_fold(Sample(2, rng), ["a", "b", "c", "d"]) == ["a", "c"]
    assert rng.ranges == [(1, 3), (1, 4)]

def test_sample_replaces_slot():
    rng = ScriptedRng([1, 3, 5])
    assert run_fold(Sample(3, rng), [1, 2, 3, 4, 5, 6]) == [4, 2, 5]
    assert rng.ranges == [(1, 4), (1, 5), (1, 6)]

def test_sample_without_replacement():
    fld = Sample(10, Random(5))
    for _ in range(100):
        out = run_fold(fld, range(40))
        assert len(set(out)) == len(out)

def test_sample_inclusion_frequency():
    (k, n, trials) = (2, 5, 10000)
    fld = Sample(k, Random(2024))
    hits = [0] * n
    for _ in range(trials):
        for x in run_fold(fld, range(n)):
            hits[x] += 1
    for h in hits:
        assert h / trials == pytest.approx(k / n, abs=0.03)

def test_sample_seeded_is_reproducible():
    xs = list(range(1000))
    assert run_fold(Sample(7, Random(3)), xs) == run_fold(Sample(7, Random(3)), xs)

def test_sample_in_par():
    fld = par(Sample(4, Random(8)), filter(COUNT, lambda x: x > 10))
    (sample, big) = run_fold(fld, range(20))
    assert len(sample) == 4
    assert big == 9

def test_reservoir_state():
    fld = Sample(2, Random(0))
    acc = fld.init()
    assert isinstance(acc, Reservoir)
    for x in range(5):
        acc = fld.step(acc, x)
    assert acc.seen == 5
    assert len(acc.items) == 2

def test_moments():
    (mu, var, skew, kurt) = run_fold(Moments(), [1, 2, 3, 4, 5])
    assert mu == pytest.approx(3.0)
    assert var == pytest.approx(2.5)
    assert skew == pytest.approx(0.0, abs=1e-9)
    assert kurt == pytest.approx(1.7)

def test_moments_skewed():
    (_mu, _var, skew, _kurt) = run_fold(Moments(), [1, 1, 1, 1, 10])
    assert skew > 0

def test_moments_small_streams():
    assert all(isnan(v) for v in run_fold(Moments(), []))
    (mu, var, skew, kurt) = run_fold(Moments(), [7])
    assert mu == 7.0
    assert isnan(var)
    assert isnan(skew)
    assert isnan(kurt)

def test_moments_constant_stream():
    (mu, var, skew, kurt) = run_fold(Moments(), [2, 2, 2])
    assert mu == 2.0
    assert var == 0.0
    assert isnan(skew)

def test_mean():
    assert run_fold(mean(), [2.0, 4.0, 6.0]) == 4.0
    assert run_fold(mean(), [1, 2]) == 1.5
    assert run_fold(mean(), []) is None

def test_mean_matches_sum_over_count():
    xs = [0.5, 1.25, 8.0, -3.0]
    (total, n) = run_fold(par(SUM, COUNT), xs)
    assert run_fold(mean(), xs) == pytest.approx(total / n)
