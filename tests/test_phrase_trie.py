from __future__ import annotations

import unittest

from phrase_matcher.matcher.trie import PhraseTrie, PhraseTrieFrozenError, split_words


def _shape(trie: PhraseTrie, handle: int = 0) -> dict:
    return {
        word: (trie.terminal(child), _shape(trie, child))
        for word, child in trie.child_handles(handle).items()
    }


class PhraseTrieInsertTestCase(unittest.TestCase):
    def test_shared_prefix_creates_single_root(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden hammer")
        trie.insert("golden eye")
        trie.insert("")
        trie.insert(None)

        self.assertIsNone(trie.lookup_root(""))
        node = trie.lookup_root("golden")
        self.assertIsNotNone(node)
        self.assertEqual(trie.size(), 2)
        self.assertEqual(node.size(), 2)
        self.assertEqual(list(node.children), ["hammer", "eye"])

        trie.insert("copy and paste programming")
        self.assertEqual(trie.size(), 3)
        self.assertEqual(trie.lookup_root("golden").size(), 2)
        self.assertEqual(trie.node_count(), 7)

    def test_duplicate_insert_is_idempotent(self) -> None:
        once = PhraseTrie()
        once.insert("analysis paralysis")
        twice = PhraseTrie()
        twice.insert("analysis paralysis")
        twice.insert("analysis paralysis")

        self.assertEqual(once.size(), twice.size())
        self.assertEqual(once.node_count(), twice.node_count())
        self.assertEqual(_shape(once), _shape(twice))

    def test_blank_phrases_are_ignored(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden hammer")
        before = _shape(trie)
        for phrase in ("", "   ", "\t\n", None):
            trie.insert(phrase)
        self.assertEqual(trie.size(), 1)
        self.assertEqual(_shape(trie), before)

    def test_insert_all_order_does_not_matter(self) -> None:
        phrases = ["golden hammer", "golden eye", "golden", "copy and paste programming"]
        a = PhraseTrie()
        a.insert_all(phrases)
        b = PhraseTrie()
        b.insert_all(reversed(phrases))
        self.assertEqual(a.size(), b.size())
        self.assertEqual(a.node_count(), b.node_count())
        self.assertEqual(
            {k: sorted(v[1]) for k, v in _shape(a).items()},
            {k: sorted(v[1]) for k, v in _shape(b).items()},
        )

    def test_insert_all_accepts_none(self) -> None:
        trie = PhraseTrie()
        trie.insert_all(None)
        self.assertEqual(trie.size(), 0)

    def test_prefix_phrase_is_its_own_terminal(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden hammer")
        self.assertIsNone(trie.lookup_root("golden").terminal_phrase)
        trie.insert("golden")
        self.assertEqual(trie.lookup_root("golden").terminal_phrase, "golden")
        self.assertEqual(trie.size(), 2)
        self.assertEqual(trie.node_count(), 2)

    def test_terminal_keeps_registered_text(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden   hammer")
        hammer = trie.lookup_root("golden").child("hammer")
        self.assertEqual(hammer.key, "hammer")
        self.assertEqual(hammer.terminal_phrase, "golden   hammer")
        self.assertEqual(hammer.size(), 0)


class PhraseTrieCaseTestCase(unittest.TestCase):
    def test_case_insensitive_keys_are_folded(self) -> None:
        trie = PhraseTrie(case_insensitive=True)
        trie.insert("Analysis Paralysis")
        trie.insert("analysis paralysis")

        node = trie.lookup_root("ANALYSIS")
        self.assertIsNotNone(node)
        self.assertEqual(node.key, "analysis")
        self.assertEqual(trie.size(), 1)
        self.assertEqual(node.child("PARALYSIS").terminal_phrase, "Analysis Paralysis")

    def test_case_sensitive_keys_are_exact(self) -> None:
        trie = PhraseTrie()
        trie.insert("Analysis paralysis")
        self.assertIsNone(trie.lookup_root("analysis"))
        self.assertIsNotNone(trie.lookup_root("Analysis"))
        trie.insert("analysis paralysis")
        self.assertEqual(trie.size(), 2)


class PhraseTrieFreezeTestCase(unittest.TestCase):
    def test_frozen_trie_rejects_insert(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden hammer")
        self.assertIs(trie.freeze(), trie)
        self.assertTrue(trie.frozen)
        with self.assertRaises(PhraseTrieFrozenError):
            trie.insert("golden eye")
        self.assertEqual(trie.size(), 1)
        self.assertEqual(trie.lookup_root("golden").size(), 1)

    def test_frozen_children_are_read_only(self) -> None:
        trie = PhraseTrie()
        trie.insert("golden hammer")
        trie.freeze()
        with self.assertRaises(TypeError):
            trie.child_handles(0)["x"] = 1  # type: ignore[index]


class SplitWordsTestCase(unittest.TestCase):
    def test_split_words(self) -> None:
        self.assertEqual(split_words(" golden \t hammer\n"), ["golden", "hammer"])
        self.assertEqual(split_words(""), [])
        self.assertEqual(split_words(None), [])


if __name__ == "__main__":
    unittest.main()
