import unittest

from minpq.errors import ElementNotFoundError, EmptyQueueError
from minpq.unsorted_array_min_pq import UnsortedArrayMinPQ


class TestUnsortedArrayMinPQ(unittest.TestCase):
    def test_first_stored_wins_ties(self):
        pq = UnsortedArrayMinPQ()
        for element in "abc":
            pq.add(element, 1.0)
        self.assertEqual(pq.peek_min(), "a")
        self.assertEqual(pq.remove_min(), "a")
        # the last entry took the place of the removed one
        self.assertListEqual(list(pq), ["c", "b"])
        self.assertEqual(pq.peek_min(), "c")

    def test_remove_last_entry(self):
        pq = UnsortedArrayMinPQ()
        pq.add("a", 2.0)
        pq.add("b", 1.0)
        self.assertEqual(pq.remove_min(), "b")
        self.assertListEqual(list(pq), ["a"])
        self.assertEqual(pq.remove_min(), "a")
        self.assertTrue(pq.is_empty())
        with self.assertRaises(EmptyQueueError):
            pq.remove_min()

    def test_change_priority_keeps_storage_order(self):
        pq = UnsortedArrayMinPQ([("a", 1.0), ("b", 2.0), ("c", 3.0)])
        pq.change_priority("c", 0.0)
        self.assertListEqual(list(pq), ["a", "b", "c"])
        self.assertEqual(pq.peek_min(), "c")
        with self.assertRaises(ElementNotFoundError):
            pq.change_priority("d", 0.0)

    def test_equality_based_membership(self):
        pq = UnsortedArrayMinPQ()
        pq.add((1, 2), 5.0)
        self.assertTrue(pq.contains((1, 2)))
        self.assertFalse(pq.contains((2, 1)))
        self.assertEqual(pq.priority_of((1, 2)), 5.0)
