from folds.fold import \
    Fold,     \
    batched,  \
    filter,   \
    group_by, \
    many,     \
    par,      \
    post_map, \
    pre_map,  \
    run_fold, \
    scan,     \
    then
from folds.common import \
    Collect, \
    Count,   \
    First,   \
    Last,    \
    Max,     \
    Min,     \
    Sum
from folds.stats import Moments, Sample, mean
