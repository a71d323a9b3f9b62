# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Generic, Iterator, Tuple, Type

from fallibleiter.adapters import checked_pairs, generator_producer2
from fallibleiter.base_seq import BaseSeq
from fallibleiter.types import Emit2, GeneratorFn2, K, Producer2, V


class FallibleSeq2(BaseSeq, Generic[K, V]):
    """Sequence of key/value pairs whose producer may fail.

    Same contract as :class:`fallibleiter.FallibleSeq`, except that the producer calls
    ``emit(key, value)``. Iterating a sequence built with :meth:`from_generator` yields
    ``(key, value)`` tuples, so ``dict(seq)`` drives it into a mapping.

    Args:
        producer (Callable[[Callable[[K, V], bool]], Optional[BaseException]]): the producer to wrap.
        catch (Tuple[Type[BaseException], ...]): exception types raised by the producer that are
            stored as its outcome instead of propagating. Default: ``()``.
    """

    def __init__(self, producer: Producer2[K, V], catch: Tuple[Type[BaseException], ...] = ()):
        super().__init__(producer, catch=catch)

    @classmethod
    def from_generator(
        cls, gen_fn: GeneratorFn2[K, V], catch: Tuple[Type[BaseException], ...] = ()
    ) -> "FallibleSeq2[K, V]":
        """Builds a sequence from a generator function which yields ``(key, value)`` tuples and
        returns the outcome. Items which are not 2-tuples make the generator raise
        ``TypeError``, whichever way the sequence is driven.
        """
        gen_fn = checked_pairs(gen_fn)
        seq = cls(generator_producer2(gen_fn), catch=catch)
        seq._gen_fn = gen_fn
        return seq

    def range(self, step: Emit2[K, V]) -> None:
        """Drives the producer, relaying every pair to ``step``. Stores the producer's outcome
        once it returns.
        """
        self._drive(step)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self._new_iterator()
