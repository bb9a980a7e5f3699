"""Validation and invocation of caller-supplied functions by their signature."""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

_CO_VARARGS = 0x04


class _GenericType:
    """Placeholder that matches any parameter or return type."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "T"


GENERIC = _GenericType()

_UNION_ORIGINS = (typing.Union, types.UnionType)

_BUILTIN_TYPES = {
    tp.__name__: tp
    for tp in (
        bool,
        bytearray,
        bytes,
        complex,
        dict,
        float,
        frozenset,
        int,
        list,
        memoryview,
        object,
        range,
        set,
        slice,
        str,
        tuple,
        type,
    )
}


class SignatureError(TypeError):
    """Raised when a function does not have the expected signature."""


def _type_name(tp: Any) -> str:
    if tp is GENERIC:
        return "T"
    if tp is Any:
        return "Any"
    if tp is None or tp is type(None):
        return "None"
    if typing.get_origin(tp) is None and isinstance(tp, type):
        return tp.__name__
    return str(tp)


def _accepts(value: Any, expected: Any) -> bool:
    if expected is GENERIC or expected is Any:
        return True
    origin = typing.get_origin(expected)
    if origin in _UNION_ORIGINS:
        return any(_accepts(value, arg) for arg in typing.get_args(expected))
    target = expected if origin is None else origin
    if isinstance(target, type):
        return isinstance(value, target)
    return True


def _require(value: Any, expected: Any) -> None:
    if not _accepts(value, expected):
        raise TypeError(f"call using {type(value).__name__} as type {_type_name(expected)}")


@dataclass(frozen=True)
class GenericFunc:
    """A function together with the parameter and return types it declares."""

    method_name: str
    param_name: str
    fn: Callable[..., Any]
    types_in: tuple
    types_out: tuple
    variadic: bool = False

    def call(self, *args: Any) -> Any:
        """Call the function after checking the arguments against its types."""
        fixed = self.types_in[:-1] if self.variadic else self.types_in
        for expected, value in zip(fixed, args):
            _require(value, expected)
        if self.variadic:
            item_types = typing.get_args(self.types_in[-1]) or (Any,)
            for value in args[len(fixed):]:
                _require(value, item_types[0])
        return self.fn(*args)


Validator = Callable[[GenericFunc], None]


def _resolve(annotation: Any) -> Any:
    """Map a string annotation naming a builtin type to that type."""
    if isinstance(annotation, str):
        if annotation == "None":
            return None
        return _BUILTIN_TYPES.get(annotation, annotation)
    return annotation


def _unwrap(fn: Any) -> tuple[Any, int]:
    """Return the plain function behind ``fn`` and how many leading parameters are bound."""
    if isinstance(fn, types.MethodType):
        return fn.__func__, 1
    if isinstance(fn, types.FunctionType):
        return fn, 0
    call = getattr(type(fn), "__call__", None)
    if isinstance(call, types.FunctionType):
        return call, 1
    return None, 0


def _describe(fn: Callable[..., Any], method_name: str, param_name: str) -> tuple[tuple, tuple, bool]:
    func, skip = _unwrap(fn)
    code = getattr(func, "__code__", None)
    if code is None:
        raise SignatureError(
            f"{method_name}: parameter [{param_name}] has no inspectable signature"
        )
    annotations = getattr(func, "__annotations__", None) or {}
    names = code.co_varnames[: code.co_argcount]
    types_in = [_resolve(annotations.get(name, Any)) for name in names[skip:]]

    variadic = bool(code.co_flags & _CO_VARARGS)
    if variadic:
        star_name = code.co_varnames[code.co_argcount + code.co_kwonlyargcount]
        types_in.append(list[_resolve(annotations.get(star_name, Any))])

    if "return" not in annotations:
        types_out: tuple = (Any,)
    else:
        ret = _resolve(annotations["return"])
        types_out = () if ret is None or ret is type(None) else (ret,)
    return tuple(types_in), types_out, variadic


def new_generic_func(
    method_name: str,
    param_name: str,
    fn: Any,
    validate: Validator,
) -> GenericFunc:
    """Wrap ``fn`` and check it with ``validate``; raise SignatureError on mismatch."""
    if not callable(fn):
        raise SignatureError(
            f"{method_name}: parameter [{param_name}] is not a function type. "
            f"It is a '{type(fn).__name__}'"
        )
    types_in, types_out, variadic = _describe(fn, method_name, param_name)
    func = GenericFunc(method_name, param_name, fn, types_in, types_out, variadic)
    validate(func)
    return func


def _matches(expected: Optional[Sequence[Any]], actual: Sequence[Any]) -> bool:
    if expected is None:
        return True
    if len(expected) != len(actual):
        return False
    return all(e is GENERIC or a is Any or e == a for e, a in zip(expected, actual))


def simple_param_validator(
    ins: Optional[Sequence[Any]],
    outs: Optional[Sequence[Any]],
) -> Validator:
    """Return a validator requiring the given parameter and return types.

    ``None`` skips that side of the check; ``GENERIC`` matches any type.
    """

    def validate(func: GenericFunc) -> None:
        if _matches(ins, func.types_in) and _matches(outs, func.types_out):
            return
        raise SignatureError(
            f"{func.method_name}: parameter [{func.param_name}] has a invalid function signature. "
            f"Expected: '{format_fn_signature(ins, outs)}', "
            f"actual: '{format_fn_signature(func.types_in, func.types_out)}'"
        )

    return validate


def format_fn_signature(ins: Optional[Sequence[Any]], outs: Optional[Sequence[Any]]) -> str:
    """Render parameter and return types as ``func(a,b)r``."""
    params = ",".join(_type_name(tp) for tp in ins or ())
    results = ",".join(_type_name(tp) for tp in outs or ())
    return f"func({params}){results}"