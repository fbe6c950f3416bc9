"""A console walkthrough of callable references in Python.

Signature-checked delegates and multicast chains, publisher/subscriber
events, higher-order operations over an append-only store, lambdas as
syntax trees, and lazily composed queries.
"""

from __future__ import annotations

from callable_tour.delegates import Delegate, DelegateType, delegate_type, multicast
from callable_tour.events import Event, EventHook, ProcessEventArgs
from callable_tour.exceptions import (
    CallableTourError,
    ConfigurationError,
    EmptyDelegateError,
    EventAssignmentError,
    ExpressionError,
    SignatureMismatchError,
)
from callable_tour.expressions import Expression, ExpressionInfo
from callable_tour.films import FILMS, Film, Query, demonstrate_deferred_execution, movies_by_name
from callable_tour.values import ValueStore, calculate
from callable_tour.worker import Worker

__all__ = [
    "Delegate",
    "DelegateType",
    "delegate_type",
    "multicast",
    "Event",
    "EventHook",
    "ProcessEventArgs",
    "CallableTourError",
    "ConfigurationError",
    "EmptyDelegateError",
    "EventAssignmentError",
    "ExpressionError",
    "SignatureMismatchError",
    "Expression",
    "ExpressionInfo",
    "FILMS",
    "Film",
    "Query",
    "demonstrate_deferred_execution",
    "movies_by_name",
    "ValueStore",
    "calculate",
    "Worker",
]

__version__ = "0.1.0"
