import io
import unittest
from linediff.models import ColorMode, Options
from linediff.reporter import ConsoleReporter
from linediff.engine import SetDiffEngine
from linediff.utils import normalize

class FakeTTY(io.StringIO):
    def isatty(self):
        return True

def make_result(old, new):
    return SetDiffEngine(normalize(old, "old.txt"), normalize(new, "new.txt")).run()

class TestConsoleReporter(unittest.TestCase):
    def setUp(self):
        self.result = make_result(["x", "y"], ["y", "z"])

    def render(self, options=Options(color=ColorMode.NEVER), stream=None):
        stream = stream if stream is not None else io.StringIO()
        ConsoleReporter(stream, options.color).report(self.result, options)
        return stream.getvalue()

    def test_plain_output(self):
        self.assertEqual(self.render(), "-x\n+z\n")

    def test_removed_only(self):
        options = Options.from_flags(removed=True, color=ColorMode.NEVER)
        self.assertEqual(self.render(options), "-x\n")

    def test_added_only(self):
        options = Options.from_flags(added=True, color=ColorMode.NEVER)
        self.assertEqual(self.render(options), "+z\n")

    def test_print_sorted_before_diff(self):
        options = Options(print_sorted=True, color=ColorMode.NEVER)
        self.assertEqual(self.render(options),
                         "=== sorted: old.txt ===\nx\ny\n"
                         "=== sorted: new.txt ===\ny\nz\n"
                         "-x\n+z\n")

    def test_always_color(self):
        output = self.render(Options(color=ColorMode.ALWAYS))
        self.assertIn(ConsoleReporter.RED + "-x" + ConsoleReporter.ENDC, output)
        self.assertIn(ConsoleReporter.GREEN + "+z" + ConsoleReporter.ENDC, output)

    def test_auto_color_plain_when_not_a_terminal(self):
        output = self.render(Options(color=ColorMode.AUTO))
        self.assertNotIn("\033[", output)

    def test_auto_color_on_terminal(self):
        output = self.render(Options(color=ColorMode.AUTO), stream=FakeTTY())
        self.assertIn(ConsoleReporter.RED, output)

    def test_no_differences_prints_nothing(self):
        self.result = make_result(["a"], ["a"])
        self.assertEqual(self.render(), "")

if __name__ == '__main__':
    unittest.main()
