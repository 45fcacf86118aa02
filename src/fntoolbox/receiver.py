"""
Explicit receiver (the object a function is called "on").

Every callable built by the toolbox takes an optional receiver in addition to its arguments.
A plain Python function gets the receiver as its first positional argument, the same way
a method gets `self`. Callables derived from ReceiverAware get it through `apply`, so the
receiver passes through any number of wrapping layers unchanged.
"""
from typing import *
import abc
import functools

from .absent import ABSENT


def call_with(fn: Callable, receiver: Any, args: Sequence, kwargs: Dict[str, Any] = None):
    """
    Call `fn` with positional `args` and with `receiver`, ABSENT meaning no receiver.
    """
    if kwargs is None:
        kwargs = {}
    if receiver is ABSENT:
        return fn(*args, **kwargs)
    if isinstance(fn, ReceiverAware):
        return fn.apply(receiver, args, kwargs)
    return fn(receiver, *args, **kwargs)


class ReceiverAware(abc.ABC):
    """
    Callable with explicit receiver threading.

    - called directly: no receiver
    - looked up through an instance (class attribute): the instance is the receiver
    - `apply(receiver, args, kwargs)`: explicit receiver
    """

    def _wraps(self, fn):
        # Name and doc of the single wrapped function, if it has them.
        # Must precede setting own attributes, the wrapped __dict__ is copied.
        functools.update_wrapper(self, fn)

    @abc.abstractmethod
    def apply(self, receiver, args: Sequence, kwargs: Dict[str, Any] = None):
        pass

    def __call__(self, *args, **kwargs):
        return self.apply(ABSENT, args, kwargs)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return BoundCall(self, instance)


class BoundCall:
    """
    ReceiverAware callable with fixed receiver, result of the attribute lookup on an instance.
    """
    def __init__(self, fn: ReceiverAware, receiver):
        self.__func__ = fn
        self.__self__ = receiver

    def __call__(self, *args, **kwargs):
        return self.__func__.apply(self.__self__, args, kwargs)

    def __repr__(self):
        return f"<bound {self.__func__!r} of {self.__self__!r}>"
