# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from contextlib import closing
from typing import Any, Generator, Iterable, Mapping, Tuple

from fallibleiter.types import Emit, Emit2, GeneratorFn, GeneratorFn2, K, Outcome, Producer, Producer2, T, V


def generator_producer(gen_fn: GeneratorFn[T]) -> Producer[T]:
    """Converts a generator function into a producer usable by :class:`fallibleiter.FallibleSeq`.

    The generator yields items and returns the outcome. Each drive calls ``gen_fn()`` once.
    When emit asks to stop, the generator is closed and the outcome is ``None``.

    Args:
        gen_fn (Callable[[], Generator[T, None, Outcome]]): generator function to convert.
    """

    def producer(emit: Emit[T]) -> Outcome:
        with closing(gen_fn()) as gen:
            while True:
                try:
                    item = next(gen)
                except StopIteration as e:
                    return e.value
                if not emit(item):
                    return None

    return producer


def _as_pair(item: Any) -> Tuple[Any, Any]:
    if not isinstance(item, tuple) or len(item) != 2:
        raise TypeError(f"expected a (key, value) tuple, got {item!r}")
    return item


def checked_pairs(gen_fn: GeneratorFn2[K, V]) -> GeneratorFn2[K, V]:
    """Wraps a generator function so that every yielded item is checked to be a
    ``(key, value)`` tuple, raising ``TypeError`` from inside the generator otherwise.
    The wrapped generator's return value is passed through.
    """

    def gen() -> Generator[Tuple[K, V], None, Outcome]:
        with closing(gen_fn()) as inner:
            while True:
                try:
                    item = next(inner)
                except StopIteration as e:
                    return e.value
                yield _as_pair(item)

    return gen


def generator_producer2(gen_fn: GeneratorFn2[K, V]) -> Producer2[K, V]:
    """Same as :func:`generator_producer` for :class:`fallibleiter.FallibleSeq2`, the
    generator yields ``(key, value)`` tuples.
    """

    def producer(emit: Emit2[K, V]) -> Outcome:
        with closing(gen_fn()) as gen:
            while True:
                try:
                    key, value = _as_pair(next(gen))
                except StopIteration as e:
                    return e.value
                if not emit(key, value):
                    return None

    return producer


def iterable_producer(iterable: Iterable[T]) -> Producer[T]:
    """Producer that emits the items of ``iterable`` and never fails.

    ``iter()`` is called on ``iterable`` at every drive, so a one-shot iterator
    (e.g. a generator object) only emits on the first drive.
    """

    def producer(emit: Emit[T]) -> Outcome:
        for item in iterable:
            if not emit(item):
                break
        return None

    return producer


def mapping_producer(mapping: Mapping[K, V]) -> Producer2[K, V]:
    """Producer that emits the ``(key, value)`` pairs of ``mapping`` in its iteration order
    and never fails.
    """

    def producer(emit: Emit2[K, V]) -> Outcome:
        for key, value in mapping.items():
            if not emit(key, value):
                break
        return None

    return producer
