"""Signature-checked callable references and multicast chains.

A :class:`DelegateType` is built from a *prototype* function whose
parameters describe the call shape every target must accept::

    @delegate_type
    def SpeakDelegate(what_to_say: str) -> None:
        ...

    speak = SpeakDelegate(print_line)
    speak += other_printer
    speak("hello")          # both targets run, in order

Delegates are immutable. ``+`` and ``-`` build new delegates, so ``+=`` and
``-=`` simply rebind the name, which keeps a delegate that was already
handed to someone else unaffected.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Iterator, Optional, Sequence

from callable_tour.exceptions import EmptyDelegateError, SignatureMismatchError

logger = logging.getLogger(__name__)

_PLACEHOLDER = object()


def describe_target(target: Callable[..., Any]) -> str:
    """Short human-readable name for a callable, used in reprs and logs."""
    owner = getattr(target, "__self__", None)
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    if name is None:
        return repr(target)
    if owner is not None and not inspect.ismodule(owner):
        return f"{type(owner).__name__}().{getattr(target, '__name__', name)}"
    return name


class DelegateType:
    """A named call signature that targets are checked against.

    Parameters:
        name:      Display name, usually the prototype's ``__name__``.
        signature: Parameters a target must accept. *None* means any
            callable is accepted (see :func:`multicast`).
    """

    def __init__(self, name: str, signature: Optional[inspect.Signature] = None) -> None:
        self._name = name
        self._signature = signature

    @classmethod
    def from_prototype(cls, prototype: Callable[..., Any]) -> "DelegateType":
        return cls(prototype.__name__, inspect.signature(prototype))

    @property
    def name(self) -> str:
        return self._name

    @property
    def signature(self) -> Optional[inspect.Signature]:
        return self._signature

    def _placeholder_call(self) -> tuple[list[object], dict[str, object]]:
        args: list[object] = []
        kwargs: dict[str, object] = {}
        assert self._signature is not None
        for param in self._signature.parameters.values():
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
                args.append(_PLACEHOLDER)
            elif param.kind is param.KEYWORD_ONLY:
                kwargs[param.name] = _PLACEHOLDER
            # *args / **kwargs on the prototype demand nothing extra.
        return args, kwargs

    def accepts(self, target: Any) -> bool:
        """Return True when *target* can be called with this signature."""
        if not callable(target):
            return False
        if self._signature is None:
            return True
        try:
            target_signature = inspect.signature(target)
        except (TypeError, ValueError):
            # Some builtins expose no signature; trust the caller.
            return True
        args, kwargs = self._placeholder_call()
        try:
            target_signature.bind(*args, **kwargs)
        except TypeError:
            return False
        return True

    def check(self, target: Any) -> Callable[..., Any]:
        if not self.accepts(target):
            raise SignatureMismatchError(
                f"{describe_target(target)} does not match {self._name}{self._signature}"
            )
        return target

    def empty(self) -> "Delegate":
        """A delegate of this type with no targets."""
        return Delegate(self, ())

    def __call__(self, *targets: Callable[..., Any]) -> "Delegate":
        return Delegate(self, tuple(self.check(target) for target in targets))

    def __repr__(self) -> str:
        if self._signature is None:
            return f"DelegateType({self._name})"
        return f"DelegateType({self._name}{self._signature})"


def delegate_type(prototype: Callable[..., Any]) -> DelegateType:
    """Decorator turning a prototype function into a :class:`DelegateType`."""
    return DelegateType.from_prototype(prototype)


class Delegate:
    """An ordered, immutable invocation list bound to a :class:`DelegateType`."""

    __slots__ = ("_type", "_targets")

    def __init__(self, kind: DelegateType, targets: Sequence[Callable[..., Any]]) -> None:
        self._type = kind
        self._targets = tuple(targets)

    @property
    def type(self) -> DelegateType:
        return self._type

    @property
    def targets(self) -> tuple[Callable[..., Any], ...]:
        return self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def __bool__(self) -> bool:
        return bool(self._targets)

    def __iter__(self) -> Iterator[Callable[..., Any]]:
        return iter(self._targets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delegate):
            return NotImplemented
        return self._type is other._type and self._targets == other._targets

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(describe_target(t) for t in self._targets)
        return f"{self._type.name}[{names}]"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Invoke every target synchronously, returning the last result."""
        if not self._targets:
            raise EmptyDelegateError(f"{self._type.name} has no targets to invoke")
        result = None
        for target in self._targets:
            logger.debug("%s invoking %s", self._type.name, describe_target(target))
            result = target(*args, **kwargs)
        return result

    def invoke_all(self, *args: Any, **kwargs: Any) -> list[Any]:
        """Invoke every target in order and collect each result."""
        if not self._targets:
            raise EmptyDelegateError(f"{self._type.name} has no targets to invoke")
        return [target(*args, **kwargs) for target in self._targets]

    def _operand_targets(self, other: Any) -> Optional[tuple[Callable[..., Any], ...]]:
        if isinstance(other, Delegate):
            if other._type is not self._type:
                raise SignatureMismatchError(
                    f"cannot combine {other._type.name} with {self._type.name}"
                )
            return other._targets
        if callable(other):
            return (other,)
        return None

    def __add__(self, other: Any) -> "Delegate":
        added = self._operand_targets(other)
        if added is None:
            return NotImplemented
        if not isinstance(other, Delegate):
            self._type.check(other)
        return Delegate(self._type, self._targets + added)

    def __sub__(self, other: Any) -> "Delegate":
        removed = self._operand_targets(other)
        if removed is None:
            return NotImplemented
        if not removed:
            return self
        width = len(removed)
        # Search from the end: the most recently added match goes first.
        for start in range(len(self._targets) - width, -1, -1):
            if self._targets[start:start + width] == removed:
                remaining = self._targets[:start] + self._targets[start + width:]
                return Delegate(self._type, remaining)
        return self

    @staticmethod
    def combine(*delegates: "Delegate") -> "Delegate":
        """Concatenate several delegates of the same type."""
        if not delegates:
            raise ValueError("combine() needs at least one delegate")
        result = delegates[0]
        for other in delegates[1:]:
            result = result + other
        return result


ANY_CALLABLE = DelegateType("Multicast")


def multicast(*targets: Callable[..., Any]) -> Delegate:
    """An unchecked delegate, for ad hoc chains that need no fixed signature."""
    return ANY_CALLABLE(*targets)
