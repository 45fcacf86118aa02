"""
Small functional programming helpers: function decoration and composition,
argument shape adaptation, merging of injectable bodies, bounded FIFO queue.
"""
from .exceptions import ToolboxError, ParamError, InjectionError
from .absent import ABSENT, Override, is_absent
from .receiver import ReceiverAware, call_with
from .arrays import to_array, sub_array, all_but_last, for_each, for_property
from .fn import identity, compose, Composed
from .tools import catch_time
from .decorate import decorate, augmented_with, timed, loyal_to, Decorated
from .varargs import Shape, adapt, varargs_ify, spread
from .injectable import InjectableBody, merge, merge_injectable_bodies, merge_arrays
from .fifo import Fifo, BoundedFifo, make_bounded

__version__ = '0.1.0'
