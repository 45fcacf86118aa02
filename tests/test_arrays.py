import pytest
from fntoolbox import to_array, sub_array, all_but_last, for_each, for_property


def test_to_array():
    def capture(*args):
        return args

    args = capture(1, "a", None)
    arr = to_array(args)
    assert arr == [1, "a", None]
    assert type(arr) is list

    src = [1, 2, 3]
    copy = to_array(src)
    copy.append(4)
    assert src == [1, 2, 3]
    assert to_array("abc") == ['a', 'b', 'c']
    assert to_array(range(3)) == [0, 1, 2]
    assert to_array(()) == []


def test_sub_array():
    seq = [10, 20, 30, 40]
    assert sub_array(seq, 1, 3) == [20, 30]
    assert sub_array(seq, 0, 4) == seq
    assert sub_array(seq, 0, 4) is not seq
    # empty or reversed ranges
    assert sub_array(seq, 2, 2) == []
    assert sub_array(seq, 3, 1) == []
    # out of bounds
    assert sub_array(seq, 2, 5) == []
    assert sub_array(seq, -1, 2) == []
    assert sub_array([], 0, 1) == []


def test_all_but_last():
    assert all_but_last(["a", "b", len]) == ["a", "b"]
    assert all_but_last([len]) == []
    assert all_but_last([]) == []


def test_for_each():
    visited = []
    for_each(["x", "y", "z"])(lambda item, idx: visited.append((idx, item)))
    assert visited == [(0, "x"), (1, "y"), (2, "z")]


class Animal:
    legs = 4

    def __init__(self, name):
        self.name = name
        self.on_call = print

    def says(self):
        return "..."


class TestForProperty:
    def collect(self, *args, **kwargs):
        found = {}
        for_property(*args, **kwargs)(lambda name, value: found.__setitem__(name, value))
        return found

    def test_own(self):
        cat = Animal("Tom")
        assert self.collect(cat) == {'name': "Tom"}
        assert self.collect(cat, accept_functions=True) == {'name': "Tom", 'on_call': print}

    def test_inherited(self):
        cat = Animal("Tom")
        found = self.collect(cat, accept_inherited=True)
        assert found == {'name': "Tom", 'legs': 4}
        found = self.collect(cat, True, True)
        assert 'says' in found
        assert found['legs'] == 4
        assert not any(name.startswith('__') for name in found)

    def test_mapping(self):
        found = self.collect({'a': 1, 'f': len}, accept_functions=False)
        assert found == {'a': 1}
