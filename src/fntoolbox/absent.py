"""
Explicit "no value" marker.

None is an ordinary value everywhere in the toolbox, ABSENT means that no value was produced
(an initial function never invoked, a pop from an empty queue).
"""
import attrs


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def is_absent(value) -> bool:
    return value is ABSENT


@attrs.define(frozen=True)
class Override:
    """
    Returned by a decoration behavior to force the result of the decorated call,
    also when the forced value is None.
    """
    value: object = None
