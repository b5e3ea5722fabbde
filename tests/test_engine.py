import io
import unittest
from linediff.engine import SetDiffEngine, diff, marked_lines, validate_options
from linediff.errors import InvalidOption
from linediff.models import Options
from linediff.utils import normalize

def run_diff(old, new):
    return SetDiffEngine(normalize(old, "old"), normalize(new, "new")).run()

class TestSetDiffEngine(unittest.TestCase):
    def test_added_and_removed(self):
        result = run_diff(["apple", "banana", "# note", ""], ["banana", "cherry"])
        self.assertEqual(result.removed, ("apple",))
        self.assertEqual(result.added, ("cherry",))

    def test_duplicates_do_not_matter(self):
        result = run_diff(["a", "a", "b"], ["a", "b"])
        self.assertEqual(result.removed, ())
        self.assertEqual(result.added, ())
        self.assertTrue(result.is_empty)

    def test_identity(self):
        lines = ["x", "y", "# z", "x"]
        result = run_diff(lines, lines)
        self.assertTrue(result.is_empty)

    def test_symmetry(self):
        a = ["one", "two", "three", "two"]
        b = ["three", "four", "", "five"]
        forward = run_diff(a, b)
        backward = run_diff(b, a)
        self.assertEqual(forward.added, backward.removed)
        self.assertEqual(forward.removed, backward.added)

    def test_comments_never_reported(self):
        result = run_diff(["# only old", "keep"], ["keep", "# only new", ""])
        self.assertTrue(result.is_empty)

    def test_results_are_byte_ordered(self):
        result = run_diff([], ["b", "B", "a", "A"])
        self.assertEqual(result.added, ("A", "B", "a", "b"))

    def test_result_keeps_normalized_sets(self):
        result = run_diff(["b", "a"], ["c"])
        self.assertEqual(result.old.lines, ("a", "b"))
        self.assertEqual(result.old.label, "old")
        self.assertEqual(result.new.lines, ("c",))

    def test_empty_inputs(self):
        self.assertTrue(run_diff([], []).is_empty)

class TestMarkedLines(unittest.TestCase):
    def setUp(self):
        self.result = run_diff(["b", "d", "shared"], ["a", "c", "shared"])

    def test_removed_block_before_added_block(self):
        self.assertEqual(marked_lines(self.result),
                         [("-", "b"), ("-", "d"), ("+", "a"), ("+", "c")])

    def test_interleaved_order(self):
        entries = marked_lines(self.result, Options(interleave=True))
        self.assertEqual(entries, [("+", "a"), ("-", "b"), ("+", "c"), ("-", "d")])

    def test_removed_only(self):
        result = run_diff(["x", "y"], ["y", "z"])
        self.assertEqual(marked_lines(result, Options.from_flags(removed=True)), [("-", "x")])

    def test_added_only(self):
        result = run_diff(["x", "y"], ["y", "z"])
        self.assertEqual(marked_lines(result, Options.from_flags(added=True)), [("+", "z")])

class TestDiff(unittest.TestCase):
    def test_diff_from_streams(self):
        old = io.BytesIO(b"apple\nbanana\n# note\n\n")
        new = io.StringIO("banana\ncherry\n")
        result = diff(old, new)
        self.assertEqual(result.removed, ("apple",))
        self.assertEqual(result.added, ("cherry",))

    def test_diff_accepts_option_mapping(self):
        result = diff(io.StringIO("a\n"), io.StringIO("b\n"), {"show_added": False})
        self.assertEqual(result.added, ("b",))

    def test_validate_options_accepts_known_forms(self):
        self.assertIsNone(validate_options(None))
        self.assertIsNone(validate_options(Options()))
        self.assertIsNone(validate_options({"color": "never", "interleave": True}))

    def test_validate_options_rejects_bad_color(self):
        with self.assertRaises(InvalidOption):
            validate_options({"color": "rainbow"})

    def test_diff_rejects_unknown_option(self):
        with self.assertRaises(InvalidOption):
            diff(io.StringIO("a\n"), io.StringIO("b\n"), {"verbose": True})

if __name__ == '__main__':
    unittest.main()
