# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

import logging
from typing import Any, Callable, Generator, Iterator, Optional, Tuple, Type

from fallibleiter.types import Outcome

logger = logging.getLogger(__name__)


# Never turned into an outcome, even if a broader class is listed in ``catch``
_NEVER_CAUGHT = (GeneratorExit, KeyboardInterrupt, SystemExit)


class BaseSeq:
    """BaseSeq holds the state shared by :class:`fallibleiter.FallibleSeq` and
    :class:`fallibleiter.FallibleSeq2`: the wrapped producer and the error returned by
    the most recent drive.

    A drive is one call to ``range()`` (or one pass over ``iter()`` for sequences built
    with ``from_generator``). It runs the producer to completion on the caller's stack,
    then overwrites the stored error with whatever the producer returned, ``None``
    included. Errors are opt-in to check: nothing is raised if ``error()`` is never
    consulted.

    A drive interrupted by an exception from the consumer (the ``range()`` step or the
    body of a ``for`` loop) does not complete, so the stored error keeps its previous
    value. Under ``for``, leaving the loop before the generator returns also abandons the
    drive; use ``range()`` with a step returning ``False`` to stop early and record a
    completed drive.

    Instances are not thread-safe. Two overlapping drives of the same instance race on
    the stored error.

    Args:
        producer (Callable[..., Outcome]): callable taking an emit callback and returning
            ``None`` on success or an exception instance on failure.
        catch (Tuple[Type[BaseException], ...]): exception types which, when raised by
            the producer, end the drive and become its outcome. Default: ``()``.
    """

    def __init__(
        self,
        producer: Callable[..., Outcome],
        catch: Tuple[Type[BaseException], ...] = (),
    ):
        if not isinstance(catch, tuple) or not all(
            isinstance(exc_type, type) and issubclass(exc_type, BaseException) for exc_type in catch
        ):
            raise TypeError(f"catch must be a tuple of exception classes, got {catch!r}")
        self.producer = producer
        self.catch = catch
        self._gen_fn: Optional[Callable[[], Generator[Any, None, Outcome]]] = None
        self._last_error: Outcome = None

    def error(self) -> Outcome:
        """Returns the outcome of the most recent drive.

        ``None`` before the first drive, and after any drive whose producer succeeded.
        Should be called once the drive has returned; during a drive it still holds the
        previous drive's outcome.
        """
        return self._last_error

    def raise_error(self) -> None:
        """Raises the outcome of the most recent drive, if it is a failure.

        The stored exception is raised as-is and stays stored.
        """
        if self._last_error is not None:
            raise self._last_error

    def _drive(self, step: Callable[..., bool]) -> None:
        step_error: Optional[BaseException] = None

        def emit(*item: Any) -> bool:
            nonlocal step_error
            try:
                return step(*item)
            except BaseException as e:
                step_error = e
                raise

        try:
            outcome = self.producer(emit)
        except self.catch as e:
            # Errors of the consumer are not the producer's outcome
            if isinstance(e, _NEVER_CAUGHT) or e is step_error:
                raise
            outcome = e
        self._set_outcome(outcome)

    def _new_iterator(self) -> Iterator[Any]:
        if self._gen_fn is None:
            raise TypeError(
                f"{type(self).__name__} wraps a callback producer and cannot be iterated with iter(), "
                "drive it with range() or build it with from_generator()"
            )
        return self._run_generator(self._gen_fn)

    def _run_generator(self, gen_fn: Callable[[], Generator[Any, None, Outcome]]) -> Iterator[Any]:
        # Closing the iterator before the generator returns (break, or an exception in
        # the loop body) abandons the drive and leaves the stored error untouched.
        outcome: Outcome = None
        try:
            outcome = yield from gen_fn()
        except self.catch as e:
            if isinstance(e, _NEVER_CAUGHT):
                raise
            outcome = e
        self._set_outcome(outcome)

    def _set_outcome(self, outcome: Outcome) -> None:
        if outcome is not None:
            logger.debug("%s drive ended with error: %r", type(self).__name__, outcome)
        self._last_error = outcome
