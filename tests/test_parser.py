import os
import tempfile
import unittest
from poemdiff.input_controller import CombinedFileParser, InputController, RawFileParser


class TestInputController(unittest.TestCase):
    def setUp(self):
        self.controller = InputController()
        self.tmp = tempfile.TemporaryDirectory()
        self.path_a = self._write("test_a.txt", "roses are red\n")
        self.path_b = self._write("test_b.txt", "violets are blue")
        self.path_combined = self._write(
            "test_combined.txt",
            "--- OLD TEXT ---\nroses are red\n--- NEW TEXT ---\nviolets are blue\n")

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    def test_raw_parsing(self):
        old, new = self.controller.load(self.path_a, self.path_b)
        self.assertEqual(old, "roses are red\n")
        self.assertEqual(new, "violets are blue")

    def test_combined_parsing(self):
        old, new = self.controller.load(self.path_combined)
        self.assertEqual(old, "roses are red")
        self.assertEqual(new, "violets are blue\n")

    def test_combined_keeps_inner_blank_lines(self):
        path = self._write("stanzas.txt",
                           "--- OLD TEXT ---\na\n\nb\n--- NEW TEXT ---\na\n\n\nb")
        self.assertEqual(self.controller.load(path), ("a\n\nb", "a\n\n\nb"))

    def test_undecodable_bytes_are_replaced(self):
        path = os.path.join(self.tmp.name, "latin1.txt")
        with open(path, "wb") as f:
            f.write(b"caf\xe9 au lait")
        old, new = self.controller.load(path, self.path_b)
        self.assertEqual(old, "caf\ufffd au lait")
        self.assertEqual(new, "violets are blue")

    def test_parser_selection(self):
        self.assertIsInstance(self.controller._get_parser("b.txt"), RawFileParser)
        self.assertIsInstance(self.controller._get_parser(None), CombinedFileParser)

    def test_raw_parser_requires_two_files(self):
        with self.assertRaises(ValueError):
            RawFileParser().parse(self.path_a)

    def test_missing_file(self):
        missing = os.path.join(self.tmp.name, "nope.txt")
        with self.assertLogs("poemdiff.input_controller", level="WARNING") as logs:
            old, new = self.controller.load(missing, self.path_b)
        self.assertEqual((old, new), ("", "violets are blue"))
        self.assertIn("File not found", logs.output[0])

    def test_missing_delimiters(self):
        path = self._write("plain.txt", "just some text\n")
        with self.assertLogs("poemdiff.input_controller", level="WARNING") as logs:
            old, new = self.controller.load(path)
        self.assertEqual((old, new), ("", ""))
        self.assertIn("Missing delimiters", logs.output[0])


if __name__ == '__main__':
    unittest.main()
