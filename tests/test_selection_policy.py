import random
import unittest
from unittest.mock import patch

from poemify.classify.classifier import classify
from poemify.selection import policy
from poemify.selection.policy import select_and_mark


def _words(*tagged):
    return [classify(token, index=idx) for idx, token in enumerate(tagged)]


def _dog_race():
    return _words(("the", "DT"), ("dog", "NN"), ("runs", "VBZ"), ("the", "DT"), ("race", "NN"))


class SelectionPolicyTests(unittest.TestCase):
    def test_literal_template_instance_found_in_one_attempt(self):
        words = _dog_race()
        self.assertTrue(select_and_mark(words, max_attempts=1, rng=random.Random(7), acceptance_probability=1.0))
        marked = [w.text for w in words if w.marked]
        self.assertEqual(marked, ["the", "dog", "runs", "the", "race"])

    def test_zero_probability_exhausts_attempts_and_marks_nothing(self):
        words = _dog_race()
        with patch.object(policy, "match", wraps=policy.match) as spy:
            found = select_and_mark(words, max_attempts=5, rng=random.Random(7), acceptance_probability=0.0)
        self.assertFalse(found)
        self.assertEqual(spy.call_count, 5)
        self.assertFalse(any(w.marked for w in words))

    def test_winner_is_one_completed_match(self):
        words = _words(("dogs", "NNS"), ("chase", "VBP"), ("cats", "NNS"), ("and", "CC"), ("mice", "NNS"))
        self.assertTrue(
            select_and_mark(words, rng=random.Random(3), acceptance_probability=1.0, allow_gaps=True)
        )
        marked = [w.text for w in words if w.marked]
        self.assertIn(marked, [["dogs", "chase", "cats"], ["dogs", "chase", "cats", "and", "mice"]])

    def test_previous_marks_do_not_leak_into_next_call(self):
        words = _dog_race() + _words(("very", "RB"))
        words[-1].marked = True
        self.assertTrue(select_and_mark(words, rng=random.Random(1), acceptance_probability=1.0))
        self.assertFalse(words[-1].marked)

        before = [w.capabilities for w in words]
        self.assertTrue(select_and_mark(words, rng=random.Random(2), acceptance_probability=1.0))
        self.assertEqual([w.capabilities for w in words], before)
        self.assertEqual(sum(w.marked for w in words), 5)

    def test_failed_call_clears_earlier_marks(self):
        words = _dog_race()
        self.assertTrue(select_and_mark(words, rng=random.Random(1), acceptance_probability=1.0))
        self.assertFalse(select_and_mark(words, rng=random.Random(1), acceptance_probability=0.0))
        self.assertFalse(any(w.marked for w in words))

    def test_same_seed_same_selection(self):
        text = [("the", "DT"), ("old", "JJ"), ("dog", "NN"), ("is", "VBZ"), ("slow", "JJ"), ("and", "CC"), ("kind", "JJ")]
        first = _words(*text)
        second = _words(*text)
        select_and_mark(first, rng=random.Random(42), allow_gaps=True)
        select_and_mark(second, rng=random.Random(42), allow_gaps=True)
        self.assertEqual([w.marked for w in first], [w.marked for w in second])

    def test_denylisted_input_marks_nothing(self):
        words = _words(("very", "RB"), ("really", "RB"), ("so", "RB"))
        self.assertFalse(select_and_mark(words, rng=random.Random(0), acceptance_probability=1.0, allow_gaps=True))

    def test_marked_words_are_dumped_at_debug_level(self):
        words = _dog_race()
        with self.assertLogs("poemify.selection.policy", level="DEBUG") as captured:
            select_and_mark(words, max_attempts=1, rng=random.Random(7), acceptance_probability=1.0)
        dumped = [line for line in captured.output if "Marked" in line]
        self.assertEqual(len(dumped), 5)
        self.assertIn("'resolved_tag': 'VBZ'", dumped[2])
        self.assertIn("'marked': True", dumped[2])

    def test_empty_sequence(self):
        self.assertFalse(select_and_mark([], rng=random.Random(0)))

    def test_invalid_attempts_raise(self):
        with self.assertRaises(ValueError):
            select_and_mark(_dog_race(), max_attempts=0)


if __name__ == "__main__":
    unittest.main()
