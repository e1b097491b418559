"""Unit tests for question text rendering."""

import unittest

from quiz_client.core.markdown_math_renderer import MarkdownMathRenderer


class TestMarkdownMathRenderer(unittest.TestCase):

    def setUp(self):
        self.renderer = MarkdownMathRenderer()

    def test_fragment_renders_markdown(self):
        html = self.renderer.render_fragment("**bold** and ~~gone~~")
        self.assertIn("<strong>bold</strong>", html)
        self.assertIn("<s>gone</s>", html)

    def test_empty_fragment_placeholder(self):
        self.assertIn("No content provided", self.renderer.render_fragment("   "))

    def test_raw_html_is_escaped(self):
        html = self.renderer.render_fragment("<script>alert(1)</script>")
        self.assertNotIn("<script>alert", html)

    def test_math_is_left_for_mathjax(self):
        html = self.renderer.render_full_document("Solve $x^2 = 4$", font_size=18)
        self.assertIn("$x^2 = 4$", html)
        self.assertIn("mathjax", html)
        self.assertIn("font-size: 18pt", html)

    def test_emphasis_markers_inside_math_are_kept(self):
        html = self.renderer.render_fragment("Compute $a*b*c$ and *this*")
        self.assertIn("$a*b*c$", html)
        self.assertIn("<em>this</em>", html)
        self.assertEqual(html.count("<em>"), 1)

    def test_display_math_is_escaped_for_html(self):
        html = self.renderer.render_fragment("$$x < y$$")
        self.assertIn("$$x &lt; y$$", html)

    def test_escaped_dollar_is_plain_text(self):
        html = self.renderer.render_fragment(r"Costs \$5 or \$6")
        self.assertNotIn("QDMATH", html)
        self.assertIn("$5 or $6", html)


if __name__ == "__main__":
    unittest.main()
