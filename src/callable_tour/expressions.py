"""Lambdas as data: parse, describe, and compile ``lambda`` source text.

Python has no separate expression-tree type, but the :mod:`ast` module
gives the same view of an inline callable: its parameters, the kind of
node at the top of its body, and the operation that node performs.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from callable_tour.exceptions import ExpressionError


@dataclass(frozen=True)
class ExpressionInfo:
    parameter_count: int
    parameter_names: tuple[str, ...]
    node_type: str
    method: Optional[str]


def _method_of(node: ast.expr) -> Optional[str]:
    if isinstance(node, (ast.BinOp, ast.UnaryOp, ast.BoolOp)):
        return type(node.op).__name__
    if isinstance(node, ast.Compare):
        return type(node.ops[0]).__name__
    if isinstance(node, ast.Call):
        return ast.unparse(node.func)
    return None


class Expression:
    """A parsed ``lambda``; build one with :meth:`parse`."""

    def __init__(self, tree: ast.Expression) -> None:
        if not isinstance(tree.body, ast.Lambda):
            raise ExpressionError(f"expected a lambda, got {type(tree.body).__name__}")
        self._tree = tree
        self._lambda: ast.Lambda = tree.body

    @classmethod
    def parse(cls, source: str) -> "Expression":
        try:
            tree = ast.parse(source.strip(), mode="eval")
        except SyntaxError as e:
            raise ExpressionError(f"cannot parse {source!r}: {e.msg}") from e
        except ValueError as e:
            # NUL bytes in the source.
            raise ExpressionError(f"cannot parse {source!r}: {e}") from e
        return cls(tree)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        args = self._lambda.args
        every = [*args.posonlyargs, *args.args]
        if args.vararg is not None:
            every.append(args.vararg)
        every.extend(args.kwonlyargs)
        if args.kwarg is not None:
            every.append(args.kwarg)
        return tuple(arg.arg for arg in every)

    @property
    def body(self) -> ast.expr:
        return self._lambda.body

    def __str__(self) -> str:
        return ast.unparse(self._tree)

    def __repr__(self) -> str:
        return f"Expression({str(self)!r})"

    def compile(self, namespace: Optional[Dict[str, Any]] = None) -> Callable[..., Any]:
        """Turn the tree back into a callable.

        Names the lambda body refers to are looked up in *namespace*, then
        in builtins.
        """
        code = compile(self._tree, "<expression>", "eval")
        return eval(code, dict(namespace or {}))

    def describe(self) -> ExpressionInfo:
        names = self.parameter_names
        return ExpressionInfo(
            parameter_count=len(names),
            parameter_names=names,
            node_type=type(self.body).__name__,
            method=_method_of(self.body),
        )

    def dump(self, write: Callable[[str], None] = print) -> ExpressionInfo:
        info = self.describe()
        write(f"Parameter count: {info.parameter_count}")
        for name in info.parameter_names:
            write(f"\tParameter name: {name}")
        write(f"Expression type: {info.node_type}")
        if info.method is not None:
            write(f"Method to be called: {info.method}")
        return info
