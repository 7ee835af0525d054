"""
The state computation type.

A state computation wraps a single function from an input state to a
``(value, state)`` pair. Sequencing computations builds new functions that
close over earlier ones; nothing is ever mutated.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

from statesharp.common.monad import Monad
from statesharp.exceptions import NotAComputationError
from statesharp.state.models import StateResult

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class StateComputation(Monad[A], Generic[S, A]):
    """
    Immutable computation of shape ``S -> (A, S)``.

    Attributes:
        run: The underlying state-transformation function
    """

    run: Callable[[S], Tuple[A, S]]

    def __post_init__(self):
        if not callable(self.run):
            raise NotAComputationError(
                self.run, "StateComputation requires a callable"
            )

    def __call__(self, state: S) -> StateResult:
        """
        Run the computation against a state.

        Args:
            state: The input state

        Returns:
            The result value paired with the output state
        """
        value, new_state = self.run(state)
        return StateResult(value, new_state)

    def bind(
        self, f: Callable[[A], "StateComputation[S, B]"]
    ) -> "StateComputation[S, B]":
        """
        Sequence this computation into ``f``.

        The returned computation runs this one, passes its result to ``f``
        and runs the computation ``f`` returns on the updated state.

        Args:
            f: Function from this computation's result to the next computation

        Returns:
            The combined computation
        """

        def run_bind(state: S) -> Tuple[B, S]:
            value, new_state = self.run(state)
            following = f(value)
            if not isinstance(following, StateComputation):
                raise NotAComputationError(
                    following, "bind continuation must return a StateComputation"
                )
            return following.run(new_state)

        return StateComputation(run_bind)

    @classmethod
    def lift(cls, value: Any) -> "StateComputation[Any, Any]":
        """
        Wrap a value in a computation that leaves the state untouched.

        Args:
            value: The value to return

        Returns:
            Computation producing ``(value, state)`` for any state
        """
        return cls(lambda state: (value, state))

    def map(self, f: Callable[[A], B]) -> "StateComputation[S, B]":
        """Apply ``f`` to the result, leaving the state as this computation left it."""

        def run_map(state: S) -> Tuple[B, S]:
            value, new_state = self.run(state)
            return f(value), new_state

        return StateComputation(run_map)
