import sys
from math import isfinite, isnan
from json import JSONEncoder
from random import Random
from docopt import docopt
from delnone import delnone
from tqdm import tqdm
from folds.fold import run_fold, par
from folds.common import COUNT, SUM, MIN, MAX
from folds.stats import Moments, Sample
from folds.util import consume, ffilter, fmap, partial, pipeline

json_encoder = JSONEncoder(ensure_ascii=False, sort_keys=True)
json_encode = lambda data: json_encoder.encode(data)
json_printr = pipeline(json_encode, print)
strs_printr = pipeline(fmap(print), consume)

UI_USAGE = """
Folds

Summarise a stream of numbers, one per line, in a single pass.

Usage:
  folds summary [--sample=<k>] [--seed=<seed>] [--quiet] [<file>]
  folds sample <k> [--seed=<seed>] [--quiet] [<file>]

Options:
  --sample=<k>   Also report a uniform random sample of k values.
  --seed=<seed>  Seed for the sampler, for a reproducible sample.
  --quiet        Do not show a progress bar.
"""

def parse_number(line):
    try:
        return int(line)
    except ValueError:
        pass
    try:
        value = float(line)
    except ValueError:
        raise ValueError("Not a number: %r" % line)
    if not isfinite(value):
        raise ValueError("Not a finite number: %r" % line)
    return value

def numbers(quiet):
    return pipeline(
        partial(tqdm, desc="folding", unit=" lines", disable=quiet, leave=False),
        fmap(str.strip),
        ffilter(bool),
        fmap(parse_number))

def with_lines(path, fn):
    if path is None:
        return fn(sys.stdin)
    with open(path) as fd:
        return fn(fd)

def sampler(k, seed):
    rng = Random(int(seed)) if seed is not None else None
    return Sample(int(k), rng)

def summary_fold(sample=None):
    fld = par(COUNT, SUM, MIN, MAX, Moments())
    if sample is not None:
        return par(fld, sample)
    return fld.post_map(lambda stats: (stats, None))

def _defined(v):
    if isinstance(v, float) and isnan(v):
        return None
    return v

def summary_report(result):
    ((count, (total, (lo, (hi, moments)))), sample) = result
    (mu, var, skew, kurt) = map(_defined, moments)
    return delnone(dict(
        count=count,
        sum=total,
        min=lo,
        max=hi,
        mean=mu,
        variance=var,
        skewness=skew,
        kurtosis=kurt,
        sample=sample))

def ui_main():
    result = folds_ui(sys.argv[1:])
    sys.exit(result)

def folds_ui(argv):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    quiet = args['--quiet']
    try:
        if args['summary']:
            sample = None
            if args['--sample'] is not None:
                sample = sampler(args['--sample'], args['--seed'])
            fld = summary_fold(sample)
            result = with_lines(args['<file>'], pipeline(numbers(quiet), partial(run_fold, fld)))
            json_printr(summary_report(result))
        elif args['sample']:
            fld = sampler(args['<k>'], args['--seed'])
            result = with_lines(args['<file>'], pipeline(numbers(quiet), partial(run_fold, fld)))
            strs_printr(result)
    except ValueError as e:
        print(e, file=sys.stderr)
        exitcode = 1
    except OSError as e:
        print("Cannot read input: %s" % e, file=sys.stderr)
        exitcode = 1
    return exitcode
