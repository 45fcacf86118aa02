"""
Decoration engine: augment a function with a behavior that controls whether, when
and on which receiver the function runs, and whether its result is replaced.

A behavior is a function `behavior(invoke, args)`:
- `invoke()` runs the initial function with the call's receiver and arguments,
  `invoke(receiver)` runs it with other receiver; the result is kept as the initial result
  and also returned
- `args` is the list of positional arguments of the call
- a return value other than None replaces the initial result, return `Override(None)`
  to force None

Usage:

    def logged(invoke, args):
        logging.info(f"called with {args}")
        invoke()

    @decorate(logged)
    def add(a, b):
        return a + b
"""
from typing import *
import logging

from .absent import ABSENT, Override
from .arrays import to_array
from .fn import compose, identity
from .receiver import ReceiverAware, call_with
from .tools import catch_time

Behavior = Callable[[Callable, List], Any]


class Decorated(ReceiverAware):
    def __init__(self, behavior: Behavior, initial_function: Callable):
        self._wraps(initial_function)
        self.behavior = behavior
        self.initial_function = initial_function

    def apply(self, receiver, args, kwargs=None):
        args = to_array(args)
        initial_result = ABSENT

        def invoke(this=ABSENT):
            nonlocal initial_result
            if this is ABSENT:
                this = receiver
            initial_result = call_with(self.initial_function, this, args, kwargs)
            return initial_result

        behavior_result = self.behavior(invoke, args)
        if isinstance(behavior_result, Override):
            return behavior_result.value
        if behavior_result is None or behavior_result is ABSENT:
            return initial_result
        return behavior_result

    def __repr__(self):
        return f"Decorated({getattr(self.initial_function, '__name__', repr(self.initial_function))})"


def _decorate_one(behavior: Behavior):
    def decorator(initial_function):
        return Decorated(behavior, initial_function)
    return decorator


def decorate(*behaviors: Behavior):
    """
    Return a decorator applying the behaviors to any function, regardless of its arity.
    The first behavior is the outermost one:
    decorate(b1, b2)(f) == decorate(b1)(decorate(b2)(f))
    """
    if len(behaviors) == 0:
        return identity
    if len(behaviors) == 1:
        return _decorate_one(behaviors[0])
    return compose(decorate(*behaviors[:-1]))(_decorate_one(behaviors[-1]))


augmented_with = decorate


__timed_level = 0


def _qualified_name(fn):
    return f"{getattr(fn, '__module__', None)}.{getattr(fn, '__qualname__', repr(fn))}"


def report_duration(name: str, duration: float):
    """
    Default duration consumer of `timed`, indented by the level of the nested timed calls.
    """
    indent = (__timed_level * 2) * " "
    logging.info(f"{indent}DONE {name} @ {duration:.4f} s")


def timed(initial_function: Callable, on_duration: Callable[[float], Any] = None):
    """
    Measure elapsed time (seconds) of every call of the function.
    :param on_duration: Consumer of the duration, default is reporting to logging.info.
    """
    if on_duration is None:
        name = _qualified_name(initial_function)
        on_duration = lambda duration: report_duration(name, duration)

    def timing(invoke, args):
        global __timed_level
        __timed_level += 1
        try:
            with catch_time() as t:
                invoke()
        finally:
            __timed_level -= 1
        on_duration(t.t)

    return decorate(timing)(initial_function)


def loyal_to(owner):
    """
    Decorator making the function always run with `owner` as its receiver.
    Useful for detaching a method from an object:

    detached = loyal_to(obj)(type(obj).method)
    detached(x) == obj.method(x)
    """
    def loyalty(invoke, args):
        invoke(owner)
    return decorate(loyalty)
