import functools
import inspect
from typing import Callable, Optional, TypeVar

R = TypeVar('R')

def maybe(f: Callable[..., R]) -> Callable[..., Optional[R]]:
    """
    Lift a transform so that an absent (None) input gives an absent output.
    The input is the first parameter, not counting self.
    """
    names = list(inspect.signature(f).parameters)
    i = 1 if names[0] == 'self' else 0

    @functools.wraps(f)
    def g(*args, **kwargs):
        value = args[i] if len(args) > i else kwargs.get(names[i])
        if value is None:
            return None
        return f(*args, **kwargs)

    return g
