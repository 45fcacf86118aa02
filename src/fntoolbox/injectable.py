"""
Injectable bodies: a list of dependency names and a body function into which the
corresponding dependencies are injected, positionally.
The array notation ["name_a", "name_b", body] is the one of AngularJS services and controllers.

`merge` sequences several such bodies into one. It only works with index ranges over
the flat list of injected values, it does not know anything about the injector.
"""
from typing import *
import logging
import attrs

from .absent import ABSENT
from .arrays import all_but_last, sub_array
from .exceptions import InjectionError, ParamError


def _dependency_names(names) -> Tuple[str, ...]:
    if isinstance(names, str):
        raise ParamError(f"Dependencies must be a sequence of names, got a single string: {names!r}.")
    names = tuple(names)
    for name in names:
        if not isinstance(name, str):
            raise ParamError(f"Dependency name must be a string, got: {name!r}.")
    return names


def _check_body(instance, attribute, value):
    if not callable(value):
        raise ParamError(f"Injectable body must be callable, got: {value!r}.")


@attrs.define(frozen=True)
class InjectableBody:
    dependencies: Tuple[str, ...] = attrs.field(converter=_dependency_names)
    # Names of injected dependencies, in order of the body parameters, may repeat.
    body: Callable = attrs.field(validator=_check_body)

    @classmethod
    def create(cls, value: Union['InjectableBody', Sequence]) -> 'InjectableBody':
        """
        From the array notation: names followed by the body function.
        """
        if isinstance(value, InjectableBody):
            return value
        if isinstance(value, str) or not isinstance(value, Sequence) or len(value) == 0:
            raise ParamError(f"Injectable body array expected, got: {value!r}.")
        return cls(all_but_last(value), value[-1])

    def to_array(self) -> List:
        return [*self.dependencies, self.body]

    def __call__(self, *injected):
        return self.body(*injected)


def merge(descriptors: Iterable[Union[InjectableBody, Sequence]]) -> InjectableBody:
    """
    Merge injectable bodies into one that executes them sequentially.

    Dependencies of the result are concatenation of all the dependencies, duplicates are kept
    and injected independently. The merged body passes to every input body its own slice
    of the injected values, in the input order; it produces no result, ABSENT.
    """
    bodies = [InjectableBody.create(d) for d in descriptors]
    segments = []
    begin = 0
    for injectable in bodies:
        end = begin + len(injectable.dependencies)
        segments.append((begin, end, injectable.body))
        begin = end
    n_dependencies = begin
    dependencies = [name for injectable in bodies for name in injectable.dependencies]

    def merged_body(*injected):
        if len(injected) != n_dependencies:
            raise InjectionError(f"Merged body expects {n_dependencies} injected values, got {len(injected)}.")
        for begin, end, body in segments:
            body(*sub_array(injected, begin, end))
        return ABSENT

    logging.debug(f"Merged {len(bodies)} injectable bodies, dependencies: {dependencies}")
    return InjectableBody(dependencies, merged_body)


merge_injectable_bodies = merge


def merge_arrays(arrays: Iterable[Sequence]) -> List:
    """
    `merge` in the array notation.
    """
    return merge(arrays).to_array()
