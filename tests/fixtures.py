"""
Common code for tests.
"""


class CallLog:
    """
    Records calls of the functions it creates, in the order of the calls.
    """
    def __init__(self):
        self.log = []

    def recorder(self, name, result=None):
        def record(*args):
            self.log.append((name, args))
            return result
        record.__name__ = name
        return record

    def names(self):
        return [name for name, args in self.log]
