"""checked: signature validation at function entry.

    @checked(str, [int, None])
    def connect(host, port=None): ...

    connect(42)  # EnsureError: host must be a string, but it was a number

Display names come from the function's own parameter names.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from sigensure.application.descriptors import to_descriptors
from sigensure.application.validator import check_signature
from sigensure.domain.model.enums import ValidationMode
from sigensure.domain.model.sentinels import UNDEFINED

if TYPE_CHECKING:
    from sigensure.domain.model.descriptor import Descriptor

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def checked[**P, R](
    *descriptors: object,
    names: Sequence[str] | None = None,
    minimum: bool = False,
    method: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Validate positional parameters on every call.

    Args:
        descriptors: One descriptor literal per positional parameter
        names: Display names. None = parameter names
        minimum: MINIMUM mode (extra *args values and extra keys allowed)
        method: Skip first parameter (self/cls)

    Returns:
        Decorator

    Raises:
        InvalidDescriptorError: at decoration time, for malformed descriptors
    """
    normalized = to_descriptors(descriptors)
    mode = ValidationMode.MINIMUM if minimum else ValidationMode.EXACT

    def decorate(fn: Callable[P, R]) -> Callable[P, R]:
        sig = inspect.signature(fn)
        params = [p for p in sig.parameters.values() if p.kind in _POSITIONAL]
        if method:
            if not params:
                raise TypeError(f"{fn.__qualname__} has no self/cls parameter to skip")
            params = params[1:]
        variadic = next(
            (p.name for p in sig.parameters.values() if p.kind is inspect.Parameter.VAR_POSITIONAL),
            None,
        )
        display_names = tuple(names) if names is not None else tuple(p.name for p in params)

        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            __tracebackhide__ = True
            values = collect_arguments(sig, params, variadic, args, kwargs, len(normalized))
            check_signature(mode, values, normalized, display_names)
            return fn(*args, **kwargs)

        wrapper.__signature_descriptors__ = normalized  # type: ignore[attr-defined]
        return wrapper

    return decorate


def collect_arguments(
    sig: inspect.Signature,
    params: Sequence[inspect.Parameter],
    variadic: str | None,
    args: tuple[object, ...],
    kwargs: dict[str, object],
    declared: int,
) -> list[object]:
    """Actual values in parameter order, then *args values.

    The first `declared` parameters are always collected: missing ones read as
    UNDEFINED, defaults are applied. Later parameters count only when the caller
    supplied them, so an unchecked defaulted parameter is not an extra argument.
    Binding errors (unknown keyword, too many positionals) are Python's own TypeError.
    """
    bound = sig.bind_partial(*args, **kwargs)
    supplied = dict(bound.arguments)
    bound.apply_defaults()
    values = [bound.arguments.get(p.name, UNDEFINED) for p in params[:declared]]
    values.extend(supplied[p.name] for p in params[declared:] if p.name in supplied)
    if variadic is not None:
        values.extend(bound.arguments.get(variadic, ()))
    return values


def descriptors_of(fn: Callable[..., object]) -> tuple[Descriptor, ...] | None:
    """Descriptors attached by @checked, None if fn is not decorated."""
    return getattr(fn, "__signature_descriptors__", None)
