import builtins
import timeit
from tabulate import tabulate
from folds.fold import run_fold, par, filter
from folds.common import SUM, COUNT, MAX
from folds.stats import Moments, Sample, mean
from folds.util import partial, pipeline, ffilter

def isEven(n):
    return n % 2 == 0

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_builtin(ns):
    return sum(builtins.filter(isEven, ns))

def sum_even_pipeline(ns):
    return pipeline(ffilter(isEven), sum)(ns)

def sum_even_fold(ns):
    return run_fold(filter(SUM, isEven), ns)

def sum_even_batched(ns):
    return run_fold(filter(SUM, isEven).batched(), [ns])


def stats_multi_pass(ns):
    return (sum(ns), len(ns), max(ns))

def stats_single_pass(ns):
    return run_fold(par(SUM, COUNT, MAX), ns)

def mean_fold(ns):
    return run_fold(mean(), ns)

def moments_fold(ns):
    return run_fold(Moments(), ns)

def sample_fold(ns):
    return run_fold(Sample(20), ns)

# args example: partial(sum_even_loop, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))


hundredK = list(range(100000))

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_builtin,
                        sum_even_pipeline,
                        sum_even_fold,
                        sum_even_batched,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def test_single_pass():
    performance_compare(stats_multi_pass,
                        stats_single_pass,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def test_stats():
    performance_compare(mean_fold,
                        moments_fold,
                        sample_fold,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})
