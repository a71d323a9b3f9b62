# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from typing import Callable, Generator, Optional, Tuple, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

# None on success, the failure otherwise
Outcome = Optional[BaseException]

Emit = Callable[[T], bool]
Emit2 = Callable[[K, V], bool]

Producer = Callable[[Emit[T]], Outcome]
Producer2 = Callable[[Emit2[K, V]], Outcome]

GeneratorFn = Callable[[], Generator[T, None, Outcome]]
GeneratorFn2 = Callable[[], Generator[Tuple[K, V], None, Outcome]]
