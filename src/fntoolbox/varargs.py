"""
Argument shape adaptation between a flat variadic call and a call with
a head, one middle list and a tail.
"""
from typing import *
import attrs

from .arrays import sub_array, to_array
from .exceptions import ParamError
from .receiver import ReceiverAware, call_with


def _non_negative_int(instance, attribute, value):
    if type(value) is not int or value < 0:
        raise ParamError(f"Argument shape '{attribute.name}' must be a non-negative integer, got: {value!r}.")


@attrs.define(frozen=True)
class Shape:
    starting: int = attrs.field(default=0, validator=_non_negative_int)
    # Number of leading arguments passed positionally.
    trailing: int = attrs.field(default=0, validator=_non_negative_int)
    # Number of trailing arguments passed positionally.

    @classmethod
    def create(cls, cfg: Union[None, 'Shape', Mapping[str, int]]) -> 'Shape':
        """
        Shape from None (no leading or trailing arguments), a Shape or a configuration mapping.
        """
        if cfg is None:
            return cls()
        if isinstance(cfg, Shape):
            return cfg
        if not isinstance(cfg, Mapping):
            raise ParamError(f"Argument shape must be a mapping, got: {cfg!r}.")
        unknown = set(cfg.keys()) - {'starting', 'trailing'}
        if unknown:
            raise ParamError(f"Unknown argument shape options: {sorted(unknown)}.")
        return cls(**cfg)

    def split(self, args: Sequence) -> Tuple[List, List, List]:
        """
        Split `args` to (first, middle, last).
        Leading arguments take precedence if there are not enough of them,
        the middle is empty then and no argument is repeated.
        """
        n_args = len(args)
        n_first = min(self.starting, n_args)
        n_last = min(self.trailing, n_args - n_first)
        first = sub_array(args, 0, n_first)
        middle = sub_array(args, n_first, n_args - n_last)
        last = sub_array(args, n_args - n_last, n_args)
        return first, middle, last


class Adapted(ReceiverAware):
    def __init__(self, target: Callable, shape: Shape):
        self._wraps(target)
        self.target = target
        self.shape = shape

    def apply(self, receiver, args, kwargs=None):
        first, middle, last = self.shape.split(args)
        return call_with(self.target, receiver, [*first, middle, *last], kwargs)


def adapt(target: Callable, shape: Union[None, Shape, Mapping[str, int]] = None) -> Adapted:
    """
    Turn a function consuming a list (among other arguments) into a function with varargs.

    adapt(f)(a, b, c) == f([a, b, c])
    adapt(f, dict(starting=1, trailing=1))(a, m1, m2, b) == f(a, [m1, m2], b)

    :param shape: Numbers of starting and trailing positional arguments, see `Shape.create`.
    """
    return Adapted(target, Shape.create(shape))


varargs_ify = adapt


class Spread(ReceiverAware):
    def __init__(self, target: Callable):
        self._wraps(target)
        self.target = target

    def apply(self, receiver, args, kwargs=None):
        if len(args) != 1:
            raise TypeError(f"Spread function takes exactly one sequence argument ({len(args)} given).")
        return call_with(self.target, receiver, to_array(args[0]), kwargs)


def spread(target: Callable) -> Spread:
    """
    Inverse of `adapt`: turn a function with varargs into a function consuming one sequence.

    spread(f)([a, b, c]) == f(a, b, c)
    """
    return Spread(target)
