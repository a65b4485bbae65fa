"""Reflect callable signatures into ParameterSignature value objects."""

from __future__ import annotations

import importlib
import inspect
import re
import types
import typing
from typing import Any

from docs_standards.constants import (
    ARRAY_TYPE_NAMES,
    SCALAR_TYPE_NAMES,
)
from docs_standards.exceptions import (
    CallableNotFoundError,
    DocsStandardsError,
    TargetImportError,
)
from docs_standards.models import CallableId, CallableSignature, ParameterSignature

_TYPING_MODULES = {"builtins", "collections.abc", "typing"}
# Kinds a bound `self` / `cls` can take; `def m(*args)` binds it inside args
_IMPLICIT_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
# Builtin classes that are neither arrays nor meaningful class hints
_UNHINTED_BUILTINS = (set, frozenset, type)
_UNHINTED_TEXT_NAMES = {
    "Any",
    "set",
    "frozenset",
    "type",
    "Set",
    "FrozenSet",
    "Type",
    "AbstractSet",
    "MutableSet",
    "Iterable",
    "Iterator",
    "Collection",
}
# Leading dotted identifier of an annotation string, e.g. "t.Sequence" in "t.Sequence[int]"
_ANNOTATION_HEAD = re.compile(r"^\s*([\w.]+)")


class SignatureSource:
    """Resolve callables by dotted path and introspect their parameters.

    Functions are addressed as "pkg.mod.func"; methods as a class path plus
    method name. The implicit first parameter of plain and class methods
    (`self` / `cls`) is not part of the documented parameter list.
    """

    def __init__(self) -> None:
        self._module_cache: dict[str, types.ModuleType] = {}

    def resolve(self, path: str) -> Any:
        """Import the longest module prefix of `path`, then walk attributes.

        Args:
            path: Dotted path such as "pkg.mod.Class".

        Returns:
            The object the path points to.

        Raises:
            CallableNotFoundError: If no prefix imports or an attribute is missing.
            TargetImportError: If a module on the path raises while importing.
        """
        parts = path.split(".")
        for i in range(len(parts), 0, -1):
            module_path = ".".join(parts[:i])
            try:
                obj: Any = self._import(module_path)
            except ImportError:
                continue
            except Exception as e:
                raise TargetImportError(
                    f"Could not import `{module_path}`: {type(e).__name__}: {e}"
                ) from e
            try:
                for attr in parts[i:]:
                    obj = getattr(obj, attr)
            except AttributeError:
                break
            return obj
        raise CallableNotFoundError(f"`{path}` could not be resolved.")

    def function_id(self, path: str) -> CallableId:
        """Build the identifier of a function, checking it exists.

        Raises:
            CallableNotFoundError: If `path` is not a plain callable.
        """
        try:
            obj = self.resolve(path)
        except TargetImportError:
            raise
        except CallableNotFoundError:
            obj = None
        if obj is None or inspect.isclass(obj) or not callable(obj):
            raise CallableNotFoundError(f"The function `{path}` doesn't exist.")
        return CallableId(path)

    def method_ids(
        self,
        class_path: str,
        skip_private: bool = False,
        ignore_methods: set[str] | None = None,
    ) -> list[CallableId]:
        """Build identifiers for every method of a class, inherited included.

        Args:
            class_path: Dotted class path.
            skip_private: Also skip single-underscore methods.
            ignore_methods: Method names to leave out.

        Raises:
            CallableNotFoundError: If `class_path` is not a class.
        """
        cls = self._resolve_class(class_path)
        ignore = ignore_methods or set()
        return [
            CallableId(class_path, name)
            for name in self.list_methods(cls)
            if name not in ignore and not (skip_private and _is_private(name))
        ]

    def list_methods(self, cls: type) -> list[str]:
        """Sorted names of Python-level methods of `cls`.

        Dunder methods other than `__init__` are left out; builtin slot
        wrappers inherited from `object` never count.
        """
        names = []
        for name in dir(cls):
            if name.startswith("__") and name.endswith("__") and name != "__init__":
                continue
            func, _ = _unwrap_method(inspect.getattr_static(cls, name, None))
            if inspect.isfunction(func):
                names.append(name)
        return sorted(names)

    def get_signature(self, callable_id: CallableId) -> CallableSignature:
        """Reflect the ordered parameter list of a function or method.

        Args:
            callable_id: Function path or (class path, method name).

        Returns:
            CallableSignature with one ParameterSignature per documented parameter.

        Raises:
            CallableNotFoundError: If the callable does not exist.
            DocsStandardsError: If the callable has no introspectable signature.
        """
        func, drop_first = self.get_callable(callable_id)
        try:
            sig = inspect.signature(func)
        except (ValueError, TypeError) as e:
            raise DocsStandardsError(
                f"Could not read the signature of `{callable_id.display_name}`: {e}"
            )
        hints = _type_hints(func)
        params = list(sig.parameters.values())
        if drop_first and params and params[0].kind in _IMPLICIT_KINDS:
            params = params[1:]
        return CallableSignature(
            callable_id=callable_id,
            parameters=tuple(_parameter_signature(p, hints) for p in params),
        )

    def get_callable(self, callable_id: CallableId) -> tuple[Any, bool]:
        """Return (function object, whether its first parameter is implicit)."""
        if not callable_id.is_method:
            self.function_id(callable_id.target)
            return self.resolve(callable_id.target), False

        cls = self._resolve_class(callable_id.target)
        raw = inspect.getattr_static(cls, callable_id.method, None)
        if raw is None:
            raise CallableNotFoundError(
                f"The method `{callable_id.display_name}` doesn't exist."
            )
        func, drop_first = _unwrap_method(raw)
        if not callable(func):
            raise CallableNotFoundError(
                f"The method `{callable_id.display_name}` doesn't exist."
            )
        return func, drop_first

    def _resolve_class(self, class_path: str) -> type:
        try:
            cls = self.resolve(class_path)
        except TargetImportError:
            raise
        except CallableNotFoundError:
            cls = None
        if not inspect.isclass(cls):
            raise CallableNotFoundError(f"The class `{class_path}` doesn't exist.")
        return cls

    def _import(self, module_path: str) -> types.ModuleType:
        if module_path not in self._module_cache:
            self._module_cache[module_path] = importlib.import_module(module_path)
        return self._module_cache[module_path]


def _is_private(name: str) -> bool:
    return name.startswith("_") and not (name.startswith("__") and name.endswith("__"))


def _unwrap_method(raw: Any) -> tuple[Any, bool]:
    """Unwrap a class attribute into (function, drop implicit first param)."""
    if isinstance(raw, staticmethod):
        return raw.__func__, False
    if isinstance(raw, classmethod):
        return raw.__func__, True
    if inspect.isfunction(raw):
        return raw, True
    return raw, False


def _type_hints(func: Any) -> dict[str, Any]:
    """Resolved annotations, or {} when forward references cannot be evaluated."""
    try:
        return typing.get_type_hints(func)
    except Exception:
        return {}


def _parameter_signature(
    param: inspect.Parameter, hints: dict[str, Any]
) -> ParameterSignature:
    annotation = hints.get(param.name, param.annotation)
    is_array, is_callable, class_name = describe_annotation(annotation)
    has_default = param.default is not inspect.Parameter.empty
    is_variadic = param.kind in (
        inspect.Parameter.VAR_POSITIONAL,
        inspect.Parameter.VAR_KEYWORD,
    )
    return ParameterSignature(
        name=param.name,
        is_array_type=is_array,
        is_callable_type=is_callable,
        declared_class_name=class_name,
        is_optional=has_default or is_variadic,
        has_default_value=has_default,
        default_value=param.default if has_default else None,
    )


def describe_annotation(annotation: Any) -> tuple[bool, bool, str | None]:
    """Classify a type annotation.

    Args:
        annotation: Resolved annotation object, annotation string, or
            `inspect.Parameter.empty`.

    Returns:
        Tuple of (accepts an array, accepts a callable, class name hint).
        `Optional[X]` and `X | None` are classified as `X`; other unions
        carry no hint.
    """
    if annotation is inspect.Parameter.empty or annotation is None:
        return False, False, None
    if isinstance(annotation, str):
        return _describe_annotation_text(annotation)

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            return False, False, None
        return describe_annotation(args[0])

    base = origin or annotation
    if base in _UNHINTED_BUILTINS:
        return False, False, None
    name = getattr(base, "__name__", None) or getattr(base, "_name", None)
    module = getattr(base, "__module__", "")
    if module in _TYPING_MODULES:
        if name == "Callable":
            return False, True, None
        if name in ARRAY_TYPE_NAMES:
            return True, False, None
        if module != "builtins":
            return False, False, None  # Any, TypeVar, Protocol helpers, ...
    if inspect.isclass(base) and base.__name__ not in SCALAR_TYPE_NAMES:
        return False, False, base.__name__
    return False, False, None


def _describe_annotation_text(text: str) -> tuple[bool, bool, str | None]:
    """Classify an annotation that could not be evaluated."""
    stripped = text.strip()
    if stripped.startswith(("Optional[", "typing.Optional[")) and stripped.endswith("]"):
        return _describe_annotation_text(stripped.split("[", 1)[1][:-1])
    options = [o.strip() for o in stripped.split("|")]
    options = [o for o in options if o != "None"]
    if len(options) != 1:
        return False, False, None
    match = _ANNOTATION_HEAD.match(options[0])
    if not match:
        return False, False, None
    name = match.group(1).rsplit(".", 1)[-1]
    if name == "Callable":
        return False, True, None
    if name in ARRAY_TYPE_NAMES or name in {"List", "Tuple", "Dict"}:
        return True, False, None
    if name in SCALAR_TYPE_NAMES or name in _UNHINTED_TEXT_NAMES:
        return False, False, None
    return False, False, name
