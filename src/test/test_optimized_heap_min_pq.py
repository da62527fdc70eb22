import unittest

from minpq.errors import DuplicateElementError, ElementNotFoundError, EmptyQueueError
from minpq.eval.workload import apply_operation, generate_workload
from minpq.optimized_heap_min_pq import OptimizedHeapMinPQ


def snapshot(pq: OptimizedHeapMinPQ):
    return [(node.element, node.priority) for node in pq._heap], dict(pq._index)


class TestOptimizedHeapMinPQ(unittest.TestCase):
    def test_remove_in_priority_order(self):
        pq = OptimizedHeapMinPQ()
        pq.add("A", 3.0)
        pq.add("B", 1.0)
        pq.add("C", 2.0)
        self.assertEqual(pq.peek_min(), "B")
        self.assertEqual(pq.remove_min(), "B")
        self.assertEqual(pq.remove_min(), "C")
        self.assertEqual(pq.remove_min(), "A")
        self.assertEqual(pq.size(), 0)
        self.assertTrue(pq.is_valid())

    def test_decrease_to_new_minimum(self):
        pq = OptimizedHeapMinPQ()
        pq.add("A", 5.0)
        pq.add("B", 1.0)
        pq.change_priority("A", 0.0)
        self.assertEqual(pq.peek_min(), "A")
        self.assertTrue(pq.is_valid())

    def test_increase_sinks_below_children(self):
        pq = OptimizedHeapMinPQ()
        for element, priority in [("x", 1.0), ("y", 2.0), ("z", 3.0), ("w", 4.0)]:
            pq.add(element, priority)
        pq.change_priority("x", 10.0)
        self.assertTrue(pq.is_valid())
        self.assertEqual([pq.remove_min() for _ in range(4)], ["y", "z", "w", "x"])

    def test_duplicate_is_rejected(self):
        pq = OptimizedHeapMinPQ()
        pq.add("X", 1.0)
        with self.assertRaises(DuplicateElementError):
            pq.add("X", 2.0)
        self.assertEqual(pq.peek_min(), "X")
        self.assertEqual(pq.priority_of("X"), 1.0)
        self.assertEqual(pq.size(), 1)

    def test_empty_queue(self):
        pq = OptimizedHeapMinPQ()
        with self.assertRaises(EmptyQueueError):
            pq.remove_min()
        with self.assertRaises(EmptyQueueError):
            pq.peek_min()
        with self.assertRaises(ElementNotFoundError):
            pq.change_priority("Y", 1.0)
        self.assertTrue(pq.is_valid())

    def test_ties_follow_heap_order(self):
        pq = OptimizedHeapMinPQ()
        for element in "abc":
            pq.add(element, 1.0)
        self.assertEqual(pq.remove_min(), "a")
        # c replaced the root and b is not strictly smaller
        self.assertEqual(pq.peek_min(), "c")

    def test_swap_updates_both_structures(self):
        pq = OptimizedHeapMinPQ()
        for i in range(5):
            pq.add(i, float(i))
        pq._swap(0, 4)
        for pos, node in enumerate(pq._heap):
            self.assertEqual(pq._index[node.element], pos)
        self.assertEqual(pq._heap[0].element, 4)
        self.assertEqual(pq._heap[4].element, 0)

    def test_unchanged_priority_does_not_move(self):
        pq = OptimizedHeapMinPQ([("a", 1.0), ("b", 1.0), ("c", 2.0)])
        before = snapshot(pq)
        pq.change_priority("b", 1.0)
        self.assertEqual(snapshot(pq), before)

    def test_initial_batch_is_heapified(self):
        pairs = [(i, float((37 * i) % 101)) for i in range(100)]
        pq = OptimizedHeapMinPQ(pairs)
        self.assertTrue(pq.is_valid())
        self.assertEqual(len(pq), 100)
        removed = [pq.remove_min() for _ in range(100)]
        self.assertListEqual(removed, [e for e, _ in sorted(pairs, key=lambda pair: pair[1])])

    def test_initial_batch_with_duplicate(self):
        with self.assertRaises(DuplicateElementError):
            OptimizedHeapMinPQ([("a", 1.0), ("b", 2.0), ("a", 3.0)])

    def test_invariant_after_every_operation(self):
        for seed in range(5):
            pq = OptimizedHeapMinPQ()
            for operation in generate_workload(1000, seed=seed, integer_priorities=True, max_priority=20):
                apply_operation(pq, operation)
                self.assertTrue(pq.is_valid())

    def test_is_valid_detects_stale_index(self):
        pq = OptimizedHeapMinPQ([("a", 1.0), ("b", 2.0)])
        pq._index["a"] = 1
        self.assertFalse(pq.is_valid())

    def test_is_valid_detects_heap_violation(self):
        pq = OptimizedHeapMinPQ([("a", 1.0), ("b", 2.0)])
        pq._heap[0].priority = 3.0
        self.assertFalse(pq.is_valid())

    def test_round_trip(self):
        pq = OptimizedHeapMinPQ()
        priorities = [float((13 * i) % 17) for i in range(50)]
        for i, priority in enumerate(priorities):
            pq.add(i, priority)
        removed_priorities = []
        while not pq.is_empty():
            removed_priorities.append(pq.min_priority())
            pq.remove_min()
        self.assertListEqual(removed_priorities, sorted(priorities))
        with self.assertRaises(EmptyQueueError):
            pq.peek_min()
        self.assertEqual(pq._index, {})
