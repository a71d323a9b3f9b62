# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Generic, Iterator, Tuple, Type

from fallibleiter.adapters import generator_producer
from fallibleiter.base_seq import BaseSeq
from fallibleiter.types import Emit, GeneratorFn, Producer, T


class FallibleSeq(BaseSeq, Generic[T]):
    """Sequence of single values whose producer may fail.

    The producer receives an emit callback, calls it once per item, stops when it
    returns ``False``, and returns ``None`` or the exception describing its failure.
    That return value is kept until the next drive and exposed by :meth:`error`.

    .. code-block:: python

        def producer(emit):
            for i, v in enumerate([1, 2, -1, 3]):
                if v < 0:
                    return ValueError(f"negative value at index {i}: {v}")
                if not emit(v):
                    return None
            return None

        seq = FallibleSeq(producer)
        seq.range(lambda v: print(v) or True)
        if seq.error() is not None:
            ...

    Use :meth:`from_generator` to get a sequence which also works with ``for``.

    Args:
        producer (Callable[[Callable[[T], bool]], Optional[BaseException]]): the producer to wrap.
        catch (Tuple[Type[BaseException], ...]): exception types raised by the producer that are
            stored as its outcome instead of propagating. Default: ``()``.
    """

    def __init__(self, producer: Producer[T], catch: Tuple[Type[BaseException], ...] = ()):
        super().__init__(producer, catch=catch)

    @classmethod
    def from_generator(cls, gen_fn: GeneratorFn[T], catch: Tuple[Type[BaseException], ...] = ()) -> "FallibleSeq[T]":
        """Builds a sequence from a generator function which yields items and returns the outcome.

        The result can be driven with :meth:`range` or iterated directly; every ``iter()``
        is a new drive.
        """
        seq = cls(generator_producer(gen_fn), catch=catch)
        seq._gen_fn = gen_fn
        return seq

    def range(self, step: Emit[T]) -> None:
        """Drives the producer, relaying every item to ``step`` and ``step``'s return value back
        to the producer. Stores the producer's outcome once it returns.
        """
        self._drive(step)

    def __iter__(self) -> Iterator[T]:
        return self._new_iterator()
