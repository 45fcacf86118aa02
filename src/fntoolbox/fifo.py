"""
First-in first-out queues.

BoundedFifo is a Fifo with the `push` decorated by an eviction rule:
the oldest elements are dropped until the capacity bound holds.
Not thread safe.
"""
from typing import *
from collections import deque
import logging

from .absent import ABSENT
from .decorate import decorate
from .exceptions import ParamError


class Fifo:
    def __init__(self, elements: Iterable = ()):
        self._items = deque()
        for el in elements:
            self.push(el)

    def push(self, element) -> 'Fifo':
        """
        Append at the tail, return self to allow chaining.
        """
        self._items.append(element)
        return self

    def pop(self, default=ABSENT):
        """
        Remove and return the head (oldest) element, `default` for an empty queue.
        """
        if not self._items:
            return default
        return self._items.popleft()

    def peek(self, default=ABSENT):
        if not self._items:
            return default
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.size() == 0

    def to_array(self) -> List:
        return list(self._items)

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(self.to_array())

    def __repr__(self):
        return f"{type(self).__name__}({self.to_array()!r})"


def _evict_oldest(invoke, args):
    queue = invoke()
    while queue.size() > queue.max_size:
        evicted = queue.pop()
        logging.debug(f"{type(queue).__name__} over capacity {queue.max_size}, evicted: {evicted!r}")


class BoundedFifo(Fifo):
    """
    FIFO with fixed capacity `max_size`, pushing over the capacity evicts the oldest elements.
    Initial elements are pushed one by one, so the eviction applies to them as well.
    """
    def __init__(self, max_size: int, elements: Iterable = ()):
        if type(max_size) is not int or max_size < 0:
            raise ParamError(f"Queue max_size must be a non-negative integer, got: {max_size!r}.")
        self._max_size = max_size
        super().__init__(elements)

    @property
    def max_size(self) -> int:
        return self._max_size

    push = decorate(_evict_oldest)(Fifo.push)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> 'BoundedFifo':
        """
        Queue from a configuration mapping with keys: max_size, elements (optional).
        """
        unknown = set(cfg.keys()) - {'max_size', 'elements'}
        if unknown:
            raise ParamError(f"Unknown queue options: {sorted(unknown)}.")
        if 'max_size' not in cfg:
            raise ParamError("Missing queue option: 'max_size'.")
        elements = cfg.get('elements')
        if elements is None:
            elements = ()
        return cls(cfg['max_size'], elements)


def make_bounded(max_size: int, elements: Iterable = None) -> BoundedFifo:
    if elements is None:
        elements = ()
    return BoundedFifo(max_size, elements)
