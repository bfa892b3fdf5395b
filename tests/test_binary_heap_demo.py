"""Tests for the binary heap demo helpers."""

import sys
import os
import tempfile
import unittest
from pathlib import Path

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_heap_demo import (
    ComparisonCounter,
    Counted,
    count_heapify_comparisons,
    count_pop_comparisons,
    count_push_comparisons,
    example_1_basic_usage,
    example_2_construction_cost,
    example_3_extraction_cost,
)


class TestComparisonCounting(unittest.TestCase):
    def test_counted_records_each_comparison(self):
        counter = ComparisonCounter()
        a, b = Counted(1, counter), Counted(2, counter)
        self.assertTrue(a < b)
        self.assertFalse(b < a)
        self.assertEqual(counter.count, 2)

    def test_trivial_inputs_need_no_comparisons(self):
        self.assertEqual(count_heapify_comparisons([]), 0)
        self.assertEqual(count_heapify_comparisons([1]), 0)
        self.assertEqual(count_push_comparisons([1]), 0)

    def test_ascending_push_costs_one_comparison_per_element(self):
        self.assertEqual(count_push_comparisons(list(range(10))), 9)

    def test_heapify_is_linear(self):
        values = np.random.default_rng(0).permutation(4096).tolist()
        self.assertLessEqual(count_heapify_comparisons(values), 2 * len(values))

    def test_pop_comparisons_one_entry_per_pop(self):
        per_pop = count_pop_comparisons([4, 2, 7, 1, 9])
        self.assertEqual(len(per_pop), 5)
        self.assertEqual(per_pop[-1], 0)


class TestExamples(unittest.TestCase):
    def test_basic_usage_pops_in_order(self):
        self.assertEqual(example_1_basic_usage(), [0, 1, 10, 4, 45, 4534])

    def test_construction_cost_writes_figure(self):
        with tempfile.TemporaryDirectory() as tmp:
            result = example_2_construction_cost(sizes=(8, 32, 128), seed=1, viz_dir=Path(tmp))
            self.assertTrue((Path(tmp) / "01_construction_cost.png").exists())
        self.assertEqual(result["n"].tolist(), [8, 32, 128])
        self.assertTrue(np.all(result["heapify"] <= result["push"] * 2))

    def test_extraction_cost_writes_figure(self):
        with tempfile.TemporaryDirectory() as tmp:
            per_pop = example_3_extraction_cost(size=64, seed=1, viz_dir=Path(tmp))
            self.assertTrue((Path(tmp) / "02_extraction_cost.png").exists())
        self.assertEqual(per_pop.shape, (64,))
        self.assertLessEqual(per_pop.max(), 2 * 6)


if __name__ == "__main__":
    unittest.main()
