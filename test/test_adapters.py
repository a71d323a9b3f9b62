# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from unittest import TestCase

from fallibleiter import (
    checked_pairs,
    FallibleSeq,
    generator_producer,
    generator_producer2,
    iterable_producer,
    mapping_producer,
)
from parameterized import parameterized

from seq_utils import drive


class TestGeneratorProducer(TestCase):
    def test_emits_and_returns_outcome(self):
        err = RuntimeError("error")

        def gen():
            yield "a"
            yield "b"
            return err

        items = []
        producer = generator_producer(gen)
        self.assertIs(producer(lambda item: items.append(item) or True), err)
        self.assertEqual(items, ["a", "b"])

    @parameterized.expand([1, 2])
    def test_stop_closes_generator(self, stop_after: int):
        state = {"yielded": 0, "closed": False}

        def gen():
            try:
                for i in range(5):
                    state["yielded"] += 1
                    yield i
            finally:
                state["closed"] = True
            return RuntimeError("unreachable")

        items = []
        producer = generator_producer(gen)
        outcome = producer(lambda item: items.append(item) or len(items) < stop_after)
        self.assertIsNone(outcome)
        self.assertEqual(items, list(range(stop_after)))
        self.assertEqual(state["yielded"], stop_after)
        self.assertTrue(state["closed"])

    def test_new_generator_per_drive(self):
        calls = []

        def gen():
            calls.append(None)
            yield len(calls)

        seq = FallibleSeq(generator_producer(gen))
        self.assertEqual(drive(seq), [1])
        self.assertEqual(drive(seq), [2])

    def test_pairs(self):
        def gen():
            yield "one", 1
            yield "two", 2

        pairs = []
        producer = generator_producer2(gen)
        self.assertIsNone(producer(lambda k, v: pairs.append((k, v)) or True))
        self.assertEqual(pairs, [("one", 1), ("two", 2)])

    def test_pairs_stop(self):
        def gen():
            yield "one", 1
            yield "two", 2
            return RuntimeError("unreachable")

        pairs = []
        producer = generator_producer2(gen)
        self.assertIsNone(producer(lambda k, v: pairs.append((k, v)) and False))
        self.assertEqual(pairs, [("one", 1)])

    def test_pairs_malformed(self):
        def gen():
            yield "one"

        producer = generator_producer2(gen)
        with self.assertRaisesRegex(TypeError, "expected a"):
            producer(lambda k, v: True)


class TestCheckedPairs(TestCase):
    def test_passes_return_value(self):
        err = RuntimeError("error")

        def gen():
            yield "one", 1
            return err

        it = checked_pairs(gen)()
        self.assertEqual(next(it), ("one", 1))
        with self.assertRaises(StopIteration) as cm:
            next(it)
        self.assertIs(cm.exception.value, err)

    def test_rejects_non_pairs(self):
        def gen():
            yield "ab"

        with self.assertRaisesRegex(TypeError, "'ab'"):
            list(checked_pairs(gen)())


class TestIterableProducer(TestCase):
    def test_redrivable(self):
        seq = FallibleSeq(iterable_producer([1, 2, 3]))
        for _ in range(2):
            self.assertEqual(drive(seq), [1, 2, 3])
            self.assertIsNone(seq.error())

    def test_one_shot_iterator(self):
        seq = FallibleSeq(iterable_producer(f"str_{i}" for i in range(3)))
        self.assertEqual(drive(seq), ["str_0", "str_1", "str_2"])
        # Second time the generator is already exhausted
        self.assertEqual(drive(seq), [])

    def test_stop(self):
        seq = FallibleSeq(iterable_producer(range(10)))
        self.assertEqual(drive(seq, stop_after=3), [0, 1, 2])


class TestMappingProducer(TestCase):
    def test_order_and_stop(self):
        pairs = []
        producer = mapping_producer({"b": 2, "a": 1, "c": 3})
        self.assertIsNone(producer(lambda k, v: pairs.append((k, v)) or len(pairs) < 2))
        self.assertEqual(pairs, [("b", 2), ("a", 1)])
