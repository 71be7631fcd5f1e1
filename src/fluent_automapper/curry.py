"""Partial application for fixed-arity operations.

`curried` wraps a function so that calling it with fewer positional arguments
than it requires returns a `CurriedCall` instead of failing. Each further call
supplies more arguments until the declared arity is reached, at which point the
wrapped function runs and its plain result is returned.

A `CurriedCall` is an immutable state object: it records the function, the
arity and the arguments supplied so far. Applying it never mutates that state,
so one partial can be reused with different suffixes:

    to_person = automapper.create_map("PersonDto")
    to_person("Person")
    to_person("PersonSummary")   # independent of the previous call

Methods work unchanged because `self` is simply the first captured argument.

Keyword arguments are accepted at any step, but only those naming a required
parameter that is still missing bring the call closer to completion:

    map_to_person = automapper.map(source={...})   # still partial
    map_to_person("PersonDto", "Person")            # runs
"""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Dict, Optional, Tuple

__all__ = ["CurriedCall", "curried", "required_arity", "required_parameters"]


def required_parameters(func: Callable[..., Any]) -> Tuple[str, ...]:
    """Names of the positional parameters of `func` that have no default, in order."""
    signature = inspect.signature(func)
    return tuple(
        p.name
        for p in signature.parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and p.default is inspect.Parameter.empty
    )


def required_arity(func: Callable[..., Any]) -> int:
    return len(required_parameters(func))


class CurriedCall:
    """Captured prefix of arguments waiting for the rest of a call."""

    __slots__ = ("func", "parameters", "args", "kwargs")

    def __init__(
        self,
        func: Callable[..., Any],
        parameters: Tuple[str, ...],
        args: Tuple[Any, ...] = (),
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.func = func
        self.parameters = tuple(parameters)
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def missing(self) -> Tuple[str, ...]:
        return tuple(name for name in self.parameters[len(self.args):] if name not in self.kwargs)

    @property
    def remaining(self) -> int:
        return len(self.missing)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        call = CurriedCall(self.func, self.parameters, self.args + args, {**self.kwargs, **kwargs})
        if not call.missing:
            return self.func(*call.args, **call.kwargs)
        return call

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"<CurriedCall {name} remaining={self.remaining}>"


def curried(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate `func` so that short calls return a reusable `CurriedCall`."""
    parameters = required_parameters(func)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return CurriedCall(func, parameters)(*args, **kwargs)

    wrapper.arity = len(parameters)  # type: ignore[attr-defined]
    return wrapper
