from functools import partial as functools_partial

def identity(x):
    return x

def partial(fn, *args, **kwargs):
    out = functools_partial(fn, *args, **kwargs)
    out.__name__ = "partial_" + fn.__name__
    return out

def fmap(func):
    def mapped(collection):
        return map(func, collection)
    mapped.__name__ = "mapped_" + func.__name__
    return mapped

def ffilter(func):
    def filtered(collection):
        return filter(func, collection)
    return filtered

def consume(collection):
    for _ in collection:
        pass

def uncurry(func):
    """Wraps func so that the first arg is expanded into list args."""
    def uncurried(list_args, **kwargs):
        return func(*list_args, **kwargs)
    return uncurried

def pipeline(*funcs):
    if funcs:
        foo = funcs[0]
        rest = funcs[1:]
        if rest:
            next_hop = pipeline(*rest)
            def pipe(*args, **kwargs):
                return next_hop(foo(*args, **kwargs))
            return pipe
        else:  # no rest, foo is final function.
            return foo
    else:  # no funcs at all.
        return fmap(identity)

