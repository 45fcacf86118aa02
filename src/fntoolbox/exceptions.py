class ToolboxError(Exception):
    pass


class ParamError(ToolboxError):
    """
    Invalid configuration value: argument shape, queue capacity, injectable body array.
    """
    pass


class InjectionError(ToolboxError):
    """
    Merged injectable body called with other number of arguments than its dependencies.
    """
    pass
