import logging
from time import perf_counter


class catch_time:
    """
    Usage:
    with catch_time("loading") as t:
        ...
    print(f"... time: {t}")

    With a message the start and the elapsed time are reported to logging.info.
    """
    def __init__(self, msg=None):
        self.msg = msg
        self.t = None
        if msg is not None:
            logging.info(f"{msg} ...")

    def __enter__(self):
        self.t = perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        self.t = perf_counter() - self.t
        if self.msg is not None:
            logging.info(f"{self.msg} : T={str(self)}")

    def __str__(self):
        return f"{self.t:.4f} s"

    def __repr__(self):
        return str(self)
