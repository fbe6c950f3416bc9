from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from callable_tour import delegates
from callable_tour.exceptions import EmptyDelegateError, SignatureMismatchError


@delegates.delegate_type
def Speak(what_to_say: str) -> None:
    ...


@delegates.delegate_type
def Combine(first: int, second: int) -> int:
    ...


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def make(self, label: str):
        def target(text: str) -> str:
            self.calls.append((label, text))
            return label

        target.__name__ = label
        return target

    def method(self, text: str) -> str:
        self.calls.append(("method", text))
        return "method"


class DelegateTypeTests(unittest.TestCase):
    def test_accepts_matching_signatures(self) -> None:
        self.assertTrue(Speak.accepts(lambda text: None))
        self.assertTrue(Speak.accepts(lambda *args: None))
        self.assertTrue(Speak.accepts(lambda text, extra=1: None))
        self.assertTrue(Speak.accepts(Recorder().method))

    def test_rejects_mismatched_signatures(self) -> None:
        self.assertFalse(Speak.accepts(lambda: None))
        self.assertFalse(Speak.accepts(lambda a, b: None))
        self.assertFalse(Speak.accepts("not callable"))
        with self.assertRaises(SignatureMismatchError):
            Speak(lambda a, b: None)

    def test_mismatch_is_also_a_type_error(self) -> None:
        with self.assertRaises(TypeError):
            Combine(lambda only: only)

    def test_empty_delegate_refuses_invocation(self) -> None:
        empty = Speak.empty()
        self.assertFalse(empty)
        self.assertEqual(len(empty), 0)
        with self.assertRaises(EmptyDelegateError):
            empty("hello")


class MulticastTests(unittest.TestCase):
    def test_invokes_every_target_once_in_order(self) -> None:
        recorder = Recorder()
        labels = ["a", "b", "c", "d", "e"]
        chain = Speak.empty()
        for label in labels:
            chain += recorder.make(label)

        result = chain("hi")

        self.assertEqual(recorder.calls, [(label, "hi") for label in labels])
        self.assertEqual(result, "e")

    def test_invoke_all_collects_results(self) -> None:
        chain = Combine(lambda a, b: a + b, lambda a, b: a * b)
        self.assertEqual(chain.invoke_all(3, 4), [7, 12])
        self.assertEqual(chain(3, 4), 12)

    def test_add_returns_new_delegate(self) -> None:
        recorder = Recorder()
        first = Speak(recorder.make("a"))
        second = first + recorder.make("b")
        self.assertEqual(len(first), 1)
        self.assertEqual(len(second), 2)

    def test_add_checks_signature(self) -> None:
        with self.assertRaises(SignatureMismatchError):
            Speak(lambda text: None) + (lambda: None)

    def test_combining_different_types_fails(self) -> None:
        with self.assertRaises(SignatureMismatchError):
            Speak(lambda text: None) + Combine(lambda a, b: 0)

    def test_subtract_removes_last_occurrence_only(self) -> None:
        recorder = Recorder()
        a = recorder.make("a")
        b = recorder.make("b")
        chain = Speak(a, b, a)
        chain -= a
        self.assertEqual(chain.targets, (a, b))

    def test_subtract_missing_target_is_noop(self) -> None:
        recorder = Recorder()
        a = recorder.make("a")
        chain = Speak(a)
        self.assertEqual(chain - recorder.make("z"), chain)

    def test_subtract_bound_method(self) -> None:
        recorder = Recorder()
        chain = Speak(recorder.method, recorder.make("a"))
        chain -= recorder.method
        chain("x")
        self.assertEqual(recorder.calls, [("a", "x")])

    def test_subtract_delegate_removes_contiguous_run(self) -> None:
        recorder = Recorder()
        a, b, c = recorder.make("a"), recorder.make("b"), recorder.make("c")
        chain = Speak(a, b, c, a, b)
        self.assertEqual((chain - Speak(a, b)).targets, (a, b, c))
        self.assertEqual((chain - Speak(b, a, c)).targets, chain.targets)

    def test_removing_everything_leaves_empty_delegate(self) -> None:
        recorder = Recorder()
        a = recorder.make("a")
        chain = Speak(a) - a
        self.assertFalse(chain)
        with self.assertRaises(EmptyDelegateError):
            chain("x")

    def test_combine_many(self) -> None:
        recorder = Recorder()
        a, b = recorder.make("a"), recorder.make("b")
        combined = delegates.Delegate.combine(Speak(a), Speak(b), Speak(a))
        self.assertEqual(combined.targets, (a, b, a))

    def test_multicast_skips_signature_checks(self) -> None:
        chain = delegates.multicast(len, lambda s: s.upper())
        self.assertEqual(chain.invoke_all("abc"), [3, "ABC"])

    def test_repr_names_targets(self) -> None:
        recorder = Recorder()
        chain = Speak(recorder.method)
        self.assertEqual(repr(chain), "Speak[Recorder().method]")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
