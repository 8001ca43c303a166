import os
import tempfile
import unittest
from poemdiff.engine import calculate_diff
from poemdiff.models import Classification, Segment
from poemdiff.visualizer import HTMLVisualizer, TerminalRenderer


class TestHTMLVisualizer(unittest.TestCase):
    def setUp(self):
        self.segments = calculate_diff("The cat sat on the mat", "The cat sat on a mat")
        self.visualizer = HTMLVisualizer()

    def test_highlights(self):
        page = self.visualizer.render(self.segments)
        self.assertIn('<span class="seg-deleted">the </span>', page)
        self.assertIn('<span class="seg-added">a </span>', page)
        self.assertIn("The cat sat on ", page)
        self.assertIn('<span class="count-added">+1 words</span>', page)
        self.assertIn('<span class="count-deleted">-1 words</span>', page)

    def test_toggles(self):
        page = self.visualizer.render(self.segments, show_additions=False)
        self.assertNotIn('class="seg-added"', page)
        self.assertIn('class="seg-deleted"', page)

        page = self.visualizer.render(self.segments, show_deletions=False)
        self.assertNotIn('class="seg-deleted"', page)
        self.assertIn('class="seg-added"', page)

    def test_escapes_text(self):
        page = self.visualizer.render([Segment("<b>bold</b> & ", Classification.ADDED, 2)], title="A <poem>")
        self.assertIn("&lt;b&gt;bold&lt;/b&gt; &amp; ", page)
        self.assertIn("<title>A &lt;poem&gt;</title>", page)

    def test_generate_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "report.html")
            path = self.visualizer.generate(self.segments, target)
            self.assertEqual(path, os.path.abspath(target))
            with open(path, encoding="utf-8") as f:
                self.assertIn("<!DOCTYPE html>", f.read())


class TestTerminalRenderer(unittest.TestCase):
    def setUp(self):
        self.segments = calculate_diff("The cat sat on the mat", "The cat sat on a mat")
        self.renderer = TerminalRenderer()

    def test_markers_without_color(self):
        self.assertEqual(self.renderer.render(self.segments, color=False),
                         "The cat sat on [-the -]{+a +}mat")

    def test_hidden_highlights_render_plain(self):
        out = self.renderer.render(self.segments, show_deletions=False, color=False)
        self.assertEqual(out, "The cat sat on the {+a +}mat")

    def test_ansi_colors(self):
        out = self.renderer.render(self.segments)
        self.assertIn(TerminalRenderer.GREEN + "a " + TerminalRenderer.ENDC, out)
        self.assertIn(TerminalRenderer.FAIL + TerminalRenderer.STRIKE + "the " + TerminalRenderer.ENDC, out)


if __name__ == '__main__':
    unittest.main()
