"""
Generic contract for sequenceable computations.

This module defines the abstract base class that composable computation
types implement. A concrete type only has to supply ``bind`` and ``lift``;
``map``, ``then`` and the ``>>`` operator are derived from those two.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Monad(ABC, Generic[A]):
    """
    Abstract base class for composable computations.

    Implementations must satisfy the usual laws, for every value ``a`` and
    functions ``f`` and ``g``:

    - left identity: ``lift(a).bind(f)`` behaves like ``f(a)``
    - right identity: ``m.bind(lift)`` behaves like ``m``
    - associativity: ``m.bind(f).bind(g)`` behaves like
      ``m.bind(lambda a: f(a).bind(g))``
    """

    @abstractmethod
    def bind(self, f: Callable[[A], "Monad[B]"]) -> "Monad[B]":
        """
        Sequence this computation into a function producing the next one.

        Args:
            f: Function receiving this computation's result

        Returns:
            A computation that runs this one, then the one returned by ``f``
        """
        pass

    @classmethod
    @abstractmethod
    def lift(cls, value: Any) -> "Monad[Any]":
        """
        Wrap a plain value in a computation that simply returns it.

        Args:
            value: The value to wrap

        Returns:
            A trivial computation producing ``value``
        """
        pass

    def map(self, f: Callable[[A], B]) -> "Monad[B]":
        """Apply ``f`` to the result of this computation."""
        return self.bind(lambda a: type(self).lift(f(a)))

    def then(self, other: "Monad[B]") -> "Monad[B]":
        """Run ``other`` after this computation, discarding this result."""
        return self.bind(lambda _: other)

    def __rshift__(self, f: Callable[[A], "Monad[B]"]) -> "Monad[B]":
        return self.bind(f)
