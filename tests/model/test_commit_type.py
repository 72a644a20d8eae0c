import unittest

from conventional_commits.model.commit_type import (
    DEFAULT_TYPES,
    Category,
    CommitType,
    TypeRegistry,
)


class TestCommitType(unittest.TestCase):
    def test_valid_commit_type(self) -> None:
        commit_type = CommitType("feat", Category.FEATURE)
        self.assertEqual(commit_type.token, "feat")
        self.assertEqual(str(commit_type), "feat")

    def test_category_defaults_to_other(self) -> None:
        self.assertEqual(CommitType("wip").category, Category.OTHER)

    def test_invalid_tokens(self) -> None:
        for token in ["", "Feat", "my type", "tab\there", "a:b", "fe!at", "hot(fix"]:
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    CommitType(token)

    def test_category_must_be_enum(self) -> None:
        with self.assertRaises(ValueError):
            CommitType("feat", "feature")  # type: ignore[arg-type]

    def test_value_equality(self) -> None:
        self.assertEqual(CommitType("fix", Category.FIX), CommitType("fix", Category.FIX))
        self.assertNotEqual(CommitType("fix", Category.FIX), CommitType("fix", Category.OTHER))
        self.assertEqual(len({CommitType("ci", Category.CI), CommitType("ci", Category.CI)}), 1)


class TestTypeRegistry(unittest.TestCase):
    def test_default_table(self) -> None:
        registry = TypeRegistry.default()
        self.assertEqual(len(registry), 11)
        self.assertEqual(set(registry.tokens()), set(DEFAULT_TYPES))
        cases = [
            ("feat", Category.FEATURE),
            ("fix", Category.FIX),
            ("docs", Category.DOCS),
            ("style", Category.STYLE),
            ("refactor", Category.REFACTOR),
            ("perf", Category.PERFORMANCE),
            ("test", Category.TEST),
            ("build", Category.BUILD),
            ("ci", Category.CI),
            ("chore", Category.CHORE),
            ("revert", Category.REVERT),
        ]
        for token, category in cases:
            with self.subTest(token=token):
                self.assertEqual(registry.resolve(token), CommitType(token, category))

    def test_resolve_is_case_insensitive(self) -> None:
        registry = TypeRegistry()
        self.assertEqual(registry.resolve("PERF"), CommitType("perf", Category.PERFORMANCE))
        self.assertTrue(registry.is_known("Docs"))
        self.assertIn("CHORE", registry)
        self.assertNotIn(42, registry)

    def test_unknown_token_maps_to_other(self) -> None:
        registry = TypeRegistry()
        self.assertEqual(registry.resolve("deps").category, Category.OTHER)
        self.assertEqual(registry.category_of("deps"), Category.OTHER)
        self.assertFalse(registry.is_known("deps"))

    def test_extended_returns_new_registry(self) -> None:
        base = TypeRegistry()
        extended = base.extended({"deps": "build", "feat": Category.CHORE})
        self.assertEqual(extended.category_of("deps"), Category.BUILD)
        self.assertEqual(extended.category_of("feat"), Category.CHORE)
        self.assertEqual(base.category_of("feat"), Category.FEATURE)
        self.assertNotIn("deps", base)

    def test_string_categories_are_coerced(self) -> None:
        registry = TypeRegistry({"hotfix": "fix"})
        self.assertEqual(registry.resolve("hotfix").category, Category.FIX)
        self.assertEqual(list(registry), ["hotfix"])

    def test_invalid_entries(self) -> None:
        with self.assertRaises(ValueError):
            TypeRegistry({"HotFix": "fix"})
        with self.assertRaises(ValueError):
            TypeRegistry({"hotfix": "urgent"})
        for token in ["hot:fix", "hot!fix", "hot(fix"]:
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    TypeRegistry().extended({token: "fix"})

    def test_equality_and_repr(self) -> None:
        self.assertEqual(TypeRegistry(), TypeRegistry(DEFAULT_TYPES))
        self.assertIn("'hotfix': 'fix'", repr(TypeRegistry({"hotfix": "fix"})))


if __name__ == "__main__":
    unittest.main()
