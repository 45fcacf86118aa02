"""
Array utilities used by the rest of the toolbox.

Any ordered, indexable container with a length plays the "array-like" role:
lists, tuples (e.g. captured *args), strings, user sequences.
"""
from typing import *


def to_array(array_like: Sequence) -> List:
    """
    Independent list with the same elements in the same order.
    Also used to make defensive copies of real lists.
    """
    return [array_like[i] for i in range(len(array_like))]


def sub_array(seq: Sequence, start: int, end: int) -> List:
    """
    Elements of `seq` in [start, end).
    Empty list for an empty or out of bounds range, never raises.
    """
    if start >= end or start < 0 or end > len(seq):
        return []
    return [seq[i] for i in range(start, end)]


def all_but_last(seq: Sequence) -> List:
    return sub_array(seq, 0, len(seq) - 1)


def for_each(seq: Sequence):
    """
    Curried loop over items of `seq`:

    for_each(items)(lambda item, idx: ...)

    The body gets the item and its index.
    """
    def loop(body: Callable[[Any, int], Any]):
        for idx in range(len(seq)):
            body(seq[idx], idx)
    return loop


def for_property(obj, accept_functions: bool = False, accept_inherited: bool = False):
    """
    Curried loop over (name, value) pairs of an object, or over items of a mapping.

    :param accept_functions: Do not skip callable members.
    :param accept_inherited: Include members reachable through the class (dir(obj)),
        dunder names are still skipped. Otherwise only own attributes (vars(obj)).
    """
    def loop(body: Callable[[str, Any], Any]):
        if isinstance(obj, Mapping):
            items = list(obj.items())
        elif accept_inherited:
            items = [(name, getattr(obj, name)) for name in dir(obj)
                     if not (name.startswith('__') and name.endswith('__'))]
        else:
            items = list(vars(obj).items())
        for name, value in items:
            if callable(value) and not accept_functions:
                continue
            body(name, value)
    return loop
