"""
HTTPS triggers: plain request handlers and callable functions.
"""

import functools
from typing import Any, Callable

import functions_framework
from flask import Request

from cloud_functions import CloudFunction, make_https_function
from models import DeploymentOptions

CALLABLE_LABEL = "deployment-callable"


def _named(handler: Callable[..., Any]) -> Callable[..., Any]:
    """Return the handler, wrapped under a usable ``__name__`` if it has none."""
    if hasattr(handler, "__name__"):
        return handler

    @functools.wraps(handler)
    def wrapper(*args, **kwargs):
        return handler(*args, **kwargs)

    # partials name the wrapped function, other callables their class
    target = getattr(handler, "func", None)
    wrapper.__name__ = getattr(target, "__name__", type(handler).__name__)
    return wrapper


def on_request_with_options(
    handler: Callable[[Request], Any], options: DeploymentOptions
) -> CloudFunction:
    """
    Handle HTTP requests.

    The handler is registered with the Functions Framework under its
    ``__name__`` (or, for partials and callable objects, the wrapped
    function's or class's name) so that it can be served locally.

    Args:
        handler: Function taking a flask Request
        options: Validated deployment options
    """
    registered = functions_framework.http(_named(handler))
    return make_https_function(registered, options)


def on_call_with_options(
    handler: Callable[[Any, Any], Any], options: DeploymentOptions
) -> CloudFunction:
    """Declare a callable function invoked through a client SDK."""
    return make_https_function(handler, options, labels={CALLABLE_LABEL: "true"})
