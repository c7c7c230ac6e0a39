"""
Tests for the deep merge engine.
"""

import copy
import unittest

from BotKit.objects import deep_merge


class TestDeepMerge(unittest.TestCase):
    """Test cases for deep_merge in the default mode."""

    def test_returns_target_identity(self):
        """The target is mutated in place and returned."""
        target = {"a": 1}
        result = deep_merge(target, {"b": 2})

        self.assertIs(result, target)
        self.assertEqual(target, {"a": 1, "b": 2})

    def test_none_source_leaves_target_unchanged(self):
        """A missing source contributes no keys."""
        target = {"a": {"b": 1}}
        self.assertIs(deep_merge(target, None), target)
        self.assertIs(deep_merge(target), target)
        self.assertEqual(target, {"a": {"b": 1}})

    def test_merge_into_empty(self):
        """All source keys are copied into an empty target."""
        source = {"a": 1, "b": {"c": 2}}
        result = deep_merge({}, source)

        self.assertEqual(result, {"a": 1, "b": {"c": 2}})
        # Values are copied by reference, not cloned
        self.assertIs(result["b"], source["b"])

    def test_nested_merge(self):
        """Nested mappings are merged rather than replaced."""
        target = {"a": 1, "b": {"c": 2}}
        inner = target["b"]

        deep_merge(target, {"b": {"d": 3}})

        self.assertEqual(target, {"a": 1, "b": {"c": 2, "d": 3}})
        self.assertIs(target["b"], inner)

    def test_scalar_source_preserves_nested_target(self):
        """Recursion is decided by the target's value, so a scalar cannot replace a mapping."""
        self.assertEqual(deep_merge({"a": {"x": 1}}, {"a": 5}), {"a": {"x": 1}})
        self.assertEqual(deep_merge({"a": {"x": 1}}, {"a": None}), {"a": {"x": 1}})
        self.assertEqual(deep_merge({"a": {"x": 1}}, {"a": [1, 2]}), {"a": {"x": 1}})

    def test_scalar_target_is_overwritten(self):
        """Scalars in the target are replaced by any source value."""
        result = deep_merge({"a": 1, "b": "text"}, {"a": {"nested": True}, "b": None})
        self.assertEqual(result, {"a": {"nested": True}, "b": None})

    def test_lists_and_none_are_replaced(self):
        """Lists and None in the target are treated like scalars."""
        result = deep_merge({"tags": ["x", "y"], "owner": None}, {"tags": ["z"], "owner": {"uin": 10001}})
        self.assertEqual(result, {"tags": ["z"], "owner": {"uin": 10001}})

    def test_deeply_nested(self):
        """Merging recurses through several levels."""
        target = {
            "plugins": {
                "echo": {"enabled": True, "options": {"prefix": "!", "reply": False}},
                "admin": {"enabled": False},
            }
        }
        source = {
            "plugins": {
                "echo": {"options": {"reply": True}},
                "music": {"enabled": True},
            }
        }

        deep_merge(target, source)

        self.assertEqual(target, {
            "plugins": {
                "echo": {"enabled": True, "options": {"prefix": "!", "reply": True}},
                "admin": {"enabled": False},
                "music": {"enabled": True},
            }
        })

    def test_source_not_mutated(self):
        """The source is read-only."""
        source = {"a": {"b": 1}, "c": [1, 2]}
        snapshot = copy.deepcopy(source)

        deep_merge({"a": {"x": 0}, "c": 5}, source)

        self.assertEqual(source, snapshot)

    def test_missing_target_key_takes_source_value(self):
        """Keys absent from the target are assigned directly."""
        target = {"a": {"b": 1}}
        deep_merge(target, {"a": {"c": {"d": 2}}})
        self.assertEqual(target, {"a": {"b": 1, "c": {"d": 2}}})

    def test_non_assignable_target_raises(self):
        """A target without item assignment fails with TypeError."""
        with self.assertRaises(TypeError):
            deep_merge(None, {"a": 1})
        with self.assertRaises(TypeError):
            deep_merge(5, {"a": 1})

    def test_non_mapping_source_contributes_nothing(self):
        """Scalars and lists have no keys to copy."""
        self.assertEqual(deep_merge({"a": 1}, 5), {"a": 1})
        self.assertEqual(deep_merge({"a": 1}, [1, 2]), {"a": 1})


class TestDeepMergeLegacy(unittest.TestCase):
    """Test cases for deep_merge with legacy object handling."""

    def test_basic_behaviour_matches_default(self):
        """Plain mapping merges are unaffected by legacy mode."""
        self.assertEqual(
            deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}}, legacy=True),
            {"a": 1, "b": {"c": 2, "d": 3}},
        )
        self.assertEqual(deep_merge({"a": {"x": 1}}, {"a": 5}, legacy=True), {"a": {"x": 1}})

    def test_lists_are_merged_by_index(self):
        """A list in the target is recursed into, using source indices."""
        target = {"items": [{"id": 1}, "b"]}
        deep_merge(target, {"items": [{"name": "one"}, "B", "c"]}, legacy=True)
        self.assertEqual(target, {"items": [{"id": 1, "name": "one"}, "B", "c"]})

    def test_list_preserved_against_scalar_source(self):
        """A scalar source has no indices, so the list stays."""
        self.assertEqual(deep_merge({"items": [1, 2]}, {"items": 3}, legacy=True), {"items": [1, 2]})

    def test_shorter_source_list_keeps_tail(self):
        """Indices not present in the source are untouched."""
        self.assertEqual(deep_merge({"items": [1, 2, 3]}, {"items": [9]}, legacy=True), {"items": [9, 2, 3]})

    def test_none_target_with_scalar_source_is_kept(self):
        """None is object-like, and a scalar source has no keys to assign."""
        self.assertEqual(deep_merge({"a": None}, {"a": 5}, legacy=True), {"a": None})

    def test_none_target_with_mapping_source_raises(self):
        """Assigning into None fails."""
        with self.assertRaises(TypeError):
            deep_merge({"a": None}, {"a": {"b": 1}}, legacy=True)

    def test_missing_key_is_not_none(self):
        """An absent key is assigned, unlike a key holding None."""
        self.assertEqual(deep_merge({}, {"a": {"b": 1}}, legacy=True), {"a": {"b": 1}})

    def test_list_source_into_mapping_uses_string_keys(self):
        """List indices become string keys when merged into a mapping."""
        target = {"slots": {"0": {"id": 1}}}
        deep_merge(target, {"slots": [{"name": "one"}, "two"]}, legacy=True)
        self.assertEqual(target, {"slots": {"0": {"id": 1, "name": "one"}, "1": "two"}})

    def test_digit_string_key_into_list_assigns_by_index(self):
        """Digit-string keys address list positions."""
        target = {"items": [{"id": 1}, "b"]}
        deep_merge(target, {"items": {"0": {"name": "one"}, "1": "B", "2": "c"}}, legacy=True)
        self.assertEqual(target, {"items": [{"id": 1, "name": "one"}, "B", "c"]})

    def test_non_index_key_into_list_raises(self):
        """Keys that are not indices cannot be assigned on a list."""
        with self.assertRaises(TypeError):
            deep_merge({"items": [1]}, {"items": {"name": "x"}}, legacy=True)


if __name__ == "__main__":
    unittest.main()
