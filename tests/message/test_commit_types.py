import unittest

from semcommit.message.commit_types import COMMIT_TYPES, TYPE_TAGS, CommitType, get_commit_type
from semcommit.message.validator import header_pattern


class TestCommitTypes(unittest.TestCase):
    def test_table_order_and_contents(self) -> None:
        self.assertEqual(
            TYPE_TAGS,
            ("feat", "fix", "docs", "style", "refactor", "perf", "test", "build", "ci", "chore", "revert"),
        )
        self.assertEqual(COMMIT_TYPES[0].tag, "feat")

    def test_every_type_has_a_label(self) -> None:
        for commit_type in COMMIT_TYPES:
            self.assertTrue(commit_type.label.strip())

    def test_tags_are_unique(self) -> None:
        self.assertEqual(len(set(TYPE_TAGS)), len(TYPE_TAGS))

    def test_get_commit_type(self) -> None:
        self.assertEqual(get_commit_type("fix"), CommitType("fix", COMMIT_TYPES[1].label))
        self.assertIsNone(get_commit_type("feature"))

    def test_str_is_tag(self) -> None:
        self.assertEqual(str(COMMIT_TYPES[2]), "docs")

    def test_gate_pattern_lists_exactly_the_table(self) -> None:
        pattern = header_pattern()
        alternation = pattern[len("^("):pattern.index(")")]
        self.assertEqual(tuple(alternation.split("|")), TYPE_TAGS)


if __name__ == "__main__":
    unittest.main()
