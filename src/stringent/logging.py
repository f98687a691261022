"""
Logging helpers.
"""


# std
import inspect
import functools as ftl
import contextlib as ctx

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #
@ctx.contextmanager
def disabled(*libraries):
    """
    Temporarily disable logging for `libraries`.
    """

    for lib in libraries:
        logger.disable(lib)

    try:
        yield

    finally:
        # re-enable
        for lib in libraries:
            logger.enable(lib)


@ctx.contextmanager
def enabled(*libraries):
    """
    Temporarily enable logging for `libraries`.
    """

    for lib in libraries:
        logger.enable(lib)

    try:
        yield

    finally:
        for lib in libraries:
            logger.disable(lib)


# ---------------------------------------------------------------------------- #
def get_defining_class(method):
    """
    Get the class that defined a method.

    Parameters
    ----------
    method : types.FunctionType or types.MethodType
        The method for which the defining class will be retrieved.

    Returns
    -------
    type or None
        Class that defined the method.
    """
    if inspect.ismethod(method):
        for kls in inspect.getmro(method.__self__.__class__):
            if kls.__dict__.get(method.__name__) is method.__func__:
                return kls
        method = method.__func__

    if inspect.isfunction(method):
        name = method.__qualname__.split('.<locals>', 1)[0].rsplit('.', 1)[0]
        kls = getattr(inspect.getmodule(method), name, None)
        if isinstance(kls, type):
            return kls


class LoggingMixin:
    class Logger:

        # use descriptor so we can access the logger via logger and cls().logger

        @staticmethod
        def add_parent(record, parent):
            """Prepend the class name to the function name in the log record."""
            fname = record['function']

            if fname.startswith(('<cell line:', '<module>')):
                # catch interactive use
                return

            if method := getattr(parent, fname, None):
                parent = get_defining_class(method) or parent

            record['function'] = f'{parent.__name__}.{fname}'

        def __get__(self, obj, kls=None):
            return logger.patch(
                ftl.partial(self.add_parent, parent=(kls or type(obj)))
            )

    logger = Logger()
