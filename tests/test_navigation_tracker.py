"""Unit tests for the navigator progress dots."""

import unittest

from quiz_client.core.services.navigation_tracker import DotState, NavigationTracker, TrackerDot
from tests.fixtures import make_question


class TestNavigationTracker(unittest.TestCase):

    def setUp(self):
        self.questions = [make_question("q1"), make_question("q2"), make_question("q3")]
        self.tracker = NavigationTracker(len(self.questions))

    def test_nothing_viewed_initially(self):
        dots = self.tracker.dots(self.questions, 0, {})
        self.assertEqual([d.state for d in dots], [DotState.NOT_VIEWED] * 3)
        self.assertEqual([d.is_current for d in dots], [True, False, False])

    def test_mark_viewed_ignores_out_of_range(self):
        self.tracker.mark_viewed(5)
        self.tracker.mark_viewed(-1)
        self.assertEqual(self.tracker.viewed_indices(), set())

    def test_answered_takes_precedence_over_viewed(self):
        self.tracker.mark_viewed(0)
        self.tracker.mark_viewed(1)
        dots = self.tracker.dots(self.questions, 2, {"q1": "A"})
        self.assertEqual(
            [d.state for d in dots],
            [DotState.ANSWERED, DotState.VIEWED, DotState.NOT_VIEWED],
        )

    def test_dot_number_is_one_based(self):
        dot = TrackerDot(index=2, is_current=False, is_answered=False, is_viewed=True)
        self.assertEqual(dot.number, 3)
        self.assertEqual(dot.state, DotState.VIEWED)


if __name__ == "__main__":
    unittest.main()
