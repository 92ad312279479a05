import os
import sys
import unittest


# Ensure src/ is importable when running tests directly.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(REPO_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


from switch_table import DUPLICATE_POLICIES, ArgumentTable  # noqa: E402


class DuplicateSwitchTest(unittest.TestCase):
    def test_default_policy_keeps_first_entry(self):
        table = ArgumentTable()
        self.assertEqual(table.duplicates, "keep")
        self.assertEqual(table.parse(["-a", "1", "-a", "2"]), 1)
        self.assertEqual(table.argument("-a", 0), "1")
        self.assertEqual(table.to_dict(), {"-a": ["1"]})

    def test_keep_drops_repeat_first_argument_only(self):
        table = ArgumentTable(duplicates="keep")
        self.assertEqual(table.parse(["-a", "1", "-a", "2", "3"]), 1)
        self.assertEqual(table.to_dict(), {"-a": ["1", "3"]})

    def test_keep_appends_after_other_switches(self):
        table = ArgumentTable()
        table.parse(["-a", "1", "-b", "x", "-a", "-c", "y", "-a", "2", "3", "4"])
        self.assertEqual(table.to_dict(), {"-a": ["1", "3", "4"], "-b": ["x"], "-c": ["y"]})
        self.assertEqual(list(table.to_dict()), ["-a", "-b", "-c"])

    def test_merge_appends_every_repeat_argument(self):
        table = ArgumentTable(duplicates="merge")
        self.assertEqual(table.parse(["-a", "1", "-a", "2"]), 1)
        self.assertEqual(table.to_dict(), {"-a": ["1", "2"]})

    def test_merge_keeps_first_seen_position(self):
        table = ArgumentTable(duplicates="merge")
        table.parse(["-a", "1", "-b", "x", "-a", "2", "3", "-c"])
        self.assertEqual(table.to_dict(), {"-a": ["1", "2", "3"], "-b": ["x"], "-c": []})
        self.assertEqual(list(table.to_dict()), ["-a", "-b", "-c"])

    def test_first_policy_ignores_later_occurrences(self):
        table = ArgumentTable(duplicates="first")
        self.assertEqual(table.parse(["-a", "1", "-a", "2", "3", "-b", "4"]), 2)
        self.assertEqual(table.to_dict(), {"-a": ["1"], "-b": ["4"]})

    def test_first_policy_keeps_empty_first_occurrence(self):
        table = ArgumentTable(duplicates="first")
        table.parse(["-a", "-a", "2"])
        self.assertEqual(table.argument_count("-a"), 0)

    def test_last_policy_replaces_earlier_arguments(self):
        table = ArgumentTable(duplicates="last")
        table.parse(["-a", "1", "0", "-b", "-a", "2"])
        self.assertEqual(table.to_dict(), {"-a": ["2"], "-b": []})

    def test_last_policy_with_argumentless_repeat(self):
        table = ArgumentTable(duplicates="last")
        table.parse(["-a", "1", "-a"])
        self.assertEqual(table.argument_count("-a"), 0)
        self.assertTrue(table.has_switch("-a"))

    def test_unknown_policy_rejected(self):
        with self.assertRaises(ValueError):
            ArgumentTable(duplicates="overwrite")

    def test_every_policy_is_accepted(self):
        for policy in DUPLICATE_POLICIES:
            table = ArgumentTable(duplicates=policy)
            self.assertEqual(table.parse(["-a", "1"]), 1)
            self.assertIn(policy, repr(table))


if __name__ == "__main__":
    unittest.main()
