"""
Various function programming tools.
"""
from typing import *

from .absent import ABSENT
from .receiver import ReceiverAware, call_with


def identity(x):
    """
    The identity function, makes some APIs more generic.
    """
    return x


class Composed(ReceiverAware):
    """
    Fan out the call arguments to the component functions, feed their results to the final function.

    h = Composed(f, [g1, g2])
    h(*args) == f(g1(*args), g2(*args))

    Components are called without receiver, the final function gets the receiver of the call.
    """
    def __init__(self, final: Callable, components: Sequence[Callable]):
        self.final = final
        self.components = tuple(components)

    def apply(self, receiver, args, kwargs=None):
        results = [call_with(g, ABSENT, args, kwargs) for g in self.components]
        return call_with(self.final, receiver, results)

    def compose(self, *functions):
        """
        Use this composition as the final function of a further one.
        """
        return compose(self)(*functions)

    def __repr__(self):
        names = ", ".join(getattr(g, '__name__', repr(g)) for g in self.components)
        return f"Composed({getattr(self.final, '__name__', repr(self.final))}; {names})"


def compose(final: Callable = ABSENT):
    """
    Curried composition of `final` with zero or more functions of any arity:

    compose(f)(g1, ..., gk)(*args) == f(g1(*args), ..., gk(*args))
    compose(f)() is f
    compose() is identity

    The result of compose(f)(g) is the composed function itself, so compose(f)(g)(h) calls it
    with `h` as an argument, it is not the curried compose(f)(g, h).
    Use `Composed.compose` to make the composed function the final function of a further composition:
    compose(f)(g).compose(k) == compose(compose(f)(g))(k)
    """
    if final is ABSENT:
        return identity

    def combinator(*functions):
        if not functions:
            return final
        return Composed(final, functions)
    return combinator
