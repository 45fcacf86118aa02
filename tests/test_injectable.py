import logging
import pytest
from fntoolbox import (InjectableBody, merge, merge_injectable_bodies, merge_arrays,
                       ParamError, InjectionError, ABSENT)


def test_merge_ordering(calls):
    body_a = calls.recorder("A", result="discarded")
    body_b = calls.recorder("B")
    merged = merge([InjectableBody(["x"], body_a), InjectableBody(["y", "z"], body_b)])
    assert merged.dependencies == ("x", "y", "z")
    assert merged.body(1, 2, 3) is ABSENT
    assert calls.log == [("A", (1,)), ("B", (2, 3))]


def test_array_notation(calls):
    merged = merge_arrays([
        ["$http", calls.recorder("first")],
        ["$scope", "$http", calls.recorder("second")],
    ])
    assert merged[:-1] == ["$http", "$scope", "$http"]
    merged[-1]("http-1", "scope", "http-2")
    assert calls.log == [("first", ("http-1",)), ("second", ("scope", "http-2"))]


def test_bodies_without_dependencies(calls):
    merged = merge_injectable_bodies([
        [calls.recorder("no_deps")],
        ["a", calls.recorder("one")],
        InjectableBody([], calls.recorder("no_deps_2")),
    ])
    assert merged.dependencies == ("a",)
    merged("value")
    assert calls.log == [("no_deps", ()), ("one", ("value",)), ("no_deps_2", ())]


def test_merge_nothing():
    merged = merge([])
    assert merged.dependencies == ()
    assert merged() is ABSENT


def test_nested_merge(calls):
    inner = merge([["a", calls.recorder("A")], ["b", calls.recorder("B")]])
    outer = merge([inner, ["c", calls.recorder("C")]])
    assert outer.dependencies == ("a", "b", "c")
    outer(1, 2, 3)
    assert calls.names() == ["A", "B", "C"]


def test_fault_aborts(calls):
    def broken(x):
        raise RuntimeError(f"broken {x}")

    merged = merge([["a", calls.recorder("A")], ["b", broken], ["c", calls.recorder("C")]])
    with pytest.raises(RuntimeError, match="broken 2"):
        merged(1, 2, 3)
    assert calls.names() == ["A"]


def test_wrong_argument_count(calls):
    merged = merge([["a", "b", calls.recorder("AB")]])
    with pytest.raises(InjectionError):
        merged(1)
    with pytest.raises(InjectionError):
        merged(1, 2, 3)
    assert calls.log == []


def test_merge_logged(caplog):
    with caplog.at_level(logging.DEBUG):
        merge([["a", print]])
    assert "['a']" in caplog.text


class TestInjectableBody:
    def test_create(self):
        body = InjectableBody.create(["a", "b", max])
        assert body.dependencies == ("a", "b")
        assert body.body is max
        assert body.to_array() == ["a", "b", max]
        assert body(1, 5) == 5
        assert InjectableBody.create(body) is body

    def test_invalid(self):
        with pytest.raises(ParamError):
            InjectableBody.create([])
        with pytest.raises(ParamError):
            InjectableBody.create("abc")
        with pytest.raises(ParamError):
            InjectableBody.create(["a", "b"])
        with pytest.raises(ParamError):
            InjectableBody.create([1, max])
        with pytest.raises(ParamError):
            InjectableBody("a", max)
