# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Iterators which can fail.

:class:`FallibleSeq` and :class:`FallibleSeq2` wrap a producer which emits values (or
key/value pairs) through a callback and returns ``None`` or an exception when it stops.
Drive them with ``range()`` (or ``for`` when built with ``from_generator``), then check
``error()``. Each drive replaces the stored error. Checking it is up to the caller.
"""

from .adapters import checked_pairs, generator_producer, generator_producer2, iterable_producer, mapping_producer
from .base_seq import BaseSeq
from .seq import FallibleSeq
from .seq2 import FallibleSeq2
from .types import Emit, Emit2, Outcome, Producer, Producer2

try:
    from .version import __version__  # noqa: F401
except ImportError:
    pass


__all__ = [
    "BaseSeq",
    "Emit",
    "Emit2",
    "FallibleSeq",
    "FallibleSeq2",
    "Outcome",
    "Producer",
    "Producer2",
    "checked_pairs",
    "generator_producer",
    "generator_producer2",
    "iterable_producer",
    "mapping_producer",
]

assert sorted(__all__) == __all__
