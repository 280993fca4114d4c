import random
import unittest

from poemify.classify.classifier import classify
from poemify.grammar.model import Capability
from poemify.matcher.engine import MatchPhase, MatchState, match
from poemify.templates.catalog import DEFAULT_CATALOG, Template

C = Capability


def _words(*tagged):
    return [classify(token, index=idx) for idx, token in enumerate(tagged)]


def _texts(completed):
    return [" ".join(w.text for w in m.words) for m in completed]


QUICK_FOX = _words(
    ("the", "DT"), ("quick", "JJ"), ("fox", "NN"), ("runs", "VBZ"), ("the", "DT"), ("race", "NN")
)


class MatcherTests(unittest.TestCase):
    def test_quick_fox_completes_det_adj_noun_template(self):
        completed = match(QUICK_FOX, rng=random.Random(0), acceptance_probability=1.0)
        target = Template((C.DET, C.ADJ, C.NOUN), (C.VERB,), (C.ARTICLE, C.NOUN))
        found = [m for m in completed if m.template == target]
        self.assertEqual(len(found), 1)
        self.assertEqual([w.text for w in found[0].words], ["the", "quick", "fox", "runs", "the", "race"])

    def test_match_length_equals_template_length(self):
        completed = match(QUICK_FOX, rng=random.Random(0), acceptance_probability=1.0, allow_gaps=True)
        self.assertTrue(completed)
        for m in completed:
            self.assertEqual(len(m.words), m.template.length)

    def test_first_person_copula_agreement(self):
        template = Template((C.SUBJECT_PRONOUN,), (C.COPULA,), (C.ADJ,))
        am = match(_words(("i", "PRP"), ("am", "VBP"), ("kind", "JJ")), acceptance_probability=1.0)
        self.assertIn(template, [m.template for m in am])

        is_ = match(_words(("i", "PRP"), ("is", "VBZ"), ("kind", "JJ")), acceptance_probability=1.0)
        self.assertNotIn(template, [m.template for m in is_])
        self.assertEqual(is_, [])

    def test_first_person_takes_plural_verb_forms(self):
        ok = match(_words(("i", "PRP"), ("like", "VBP"), ("dogs", "NNS")), acceptance_probability=1.0)
        self.assertEqual(_texts(ok), ["i like dogs"])
        bad = match(_words(("i", "PRP"), ("likes", "VBZ"), ("dogs", "NNS")), acceptance_probability=1.0)
        self.assertEqual(bad, [])

    def test_subject_verb_number_agreement(self):
        ok = match(_words(("dogs", "NNS"), ("are", "VBP"), ("loud", "JJ")), acceptance_probability=1.0)
        self.assertEqual(_texts(ok), ["dogs are loud"])
        bad = match(_words(("dogs", "NNS"), ("is", "VBZ"), ("loud", "JJ")), acceptance_probability=1.0)
        self.assertEqual(bad, [])

    def test_object_number_is_independent_of_subject(self):
        completed = match(
            _words(("the", "DT"), ("dog", "NN"), ("chases", "VBZ"), ("cats", "NNS")),
            acceptance_probability=1.0,
        )
        self.assertEqual(_texts(completed), ["the dog chases cats"])

    def test_article_initial_sound_agreement(self):
        vowel = match(_words(("an", "DT"), ("apple", "NN"), ("is", "VBZ"), ("red", "JJ")), acceptance_probability=1.0)
        self.assertEqual(_texts(vowel), ["an apple is red"])
        mismatch = match(_words(("a", "DT"), ("apple", "NN"), ("is", "VBZ"), ("red", "JJ")), acceptance_probability=1.0)
        self.assertEqual(mismatch, [])

    def test_initial_sound_constraint_only_binds_next_word(self):
        completed = match(
            _words(("an", "DT"), ("old", "JJ"), ("dog", "NN"), ("is", "VBZ"), ("red", "JJ")),
            acceptance_probability=1.0,
        )
        self.assertEqual(_texts(completed), ["an old dog is red"])

    def test_modal_template_with_empty_object_completes_after_verb(self):
        completed = match(
            _words(("dogs", "NNS"), ("can", "MD"), ("run", "VB"), ("far", "RB")),
            acceptance_probability=1.0,
        )
        self.assertEqual(_texts(completed), ["dogs can run"])

    def test_rejected_state_is_discarded_by_default(self):
        words = _words(("the", "DT"), ("dog", "NN"), ("quietly", "RB"), ("runs", "VBZ"), ("the", "DT"), ("race", "NN"))
        self.assertEqual(match(words, acceptance_probability=1.0), [])

    def test_gaps_let_states_skip_rejected_words(self):
        words = _words(("the", "DT"), ("dog", "NN"), ("quietly", "RB"), ("runs", "VBZ"), ("the", "DT"), ("race", "NN"))
        completed = match(words, acceptance_probability=1.0, allow_gaps=True)
        self.assertIn("the dog runs the race", _texts(completed))

    def test_zero_probability_never_completes(self):
        completed = match(QUICK_FOX, rng=random.Random(1), acceptance_probability=0.0, allow_gaps=True)
        self.assertEqual(completed, [])

    def test_denylisted_and_punctuation_input_never_matches(self):
        words = _words(("very", "RB"), ("so", "RB"), ("—", ":"), ("there", "EX"), ("!", "."))
        self.assertEqual(match(words, acceptance_probability=1.0, allow_gaps=True), [])

    def test_empty_input(self):
        self.assertEqual(match([], acceptance_probability=1.0), [])

    def test_invalid_probability_raises(self):
        with self.assertRaises(ValueError):
            match(QUICK_FOX, acceptance_probability=1.5)

    def test_completed_state_accepts_nothing_more(self):
        state = MatchState(Template((C.PLURAL,), (C.MODAL, C.INFINITIVE)))
        for word in _words(("dogs", "NNS"), ("can", "MD"), ("run", "VB")):
            self.assertTrue(state.accepts(word, random.Random(0), 1.0))
            state.advance(word)
        self.assertEqual(state.phase, MatchPhase.COMPLETE)
        extra = classify(("dogs", "NNS"))
        self.assertFalse(state.accepts(extra, random.Random(0), 1.0))
        state.advance(extra)
        self.assertEqual(len(state.accepted_words), 3)

    def test_catalog_default_is_shared(self):
        completed = match(QUICK_FOX, DEFAULT_CATALOG, acceptance_probability=1.0)
        self.assertTrue(all(m.template in DEFAULT_CATALOG for m in completed))


if __name__ == "__main__":
    unittest.main()
