from unittest import TestCase

from schema_to_ts.pipeline.backends.comment_builder import CommentBuilder, build_property_comment
from schema_to_ts.pipeline.config import CommentStyle


class TestCommentBuilder(TestCase):
    """Test rendering of property documentation comments"""

    def test_empty_comment_renders_nothing(self):
        self.assertEqual(CommentBuilder("line").end(), "")
        self.assertEqual(CommentBuilder("block").end(), "")

    def test_line_style_keeps_markers(self):
        doc = CommentBuilder(CommentStyle.LINE)
        doc.add("[title] Pet name")
        doc.add("[required]")
        doc.add("[deprecated]")
        self.assertEqual(doc.end(), "// [title] Pet name\n// [required]\n// [deprecated]\n")

    def test_line_style_splits_multiline_fragments(self):
        doc = CommentBuilder("line")
        doc.add("first line\nsecond line")
        self.assertEqual(doc.end(), "// first line\n// second line\n")

    def test_block_style_transforms_markers(self):
        doc = CommentBuilder(CommentStyle.BLOCK)
        doc.add("[title]   Pet name  ")
        doc.add("The name of the pet")
        doc.add("[required]")
        doc.add("[deprecated]")
        expected = "/**\n * Pet name\n * ---\n * The name of the pet\n * [required]\n * @deprecated\n */\n"
        self.assertEqual(doc.end(), expected)

    def test_block_style_only_transforms_exact_deprecated_marker(self):
        doc = CommentBuilder("block")
        doc.add("[deprecated] since v2")
        self.assertEqual(doc.end(), "/**\n * [deprecated] since v2\n */\n")

    def test_block_style_escapes_comment_terminator(self):
        doc = CommentBuilder("block")
        doc.add("[title] a */ b")
        doc.add("Matches */*.ts globs")
        self.assertEqual(doc.end(), "/**\n * a *\\/ b\n * ---\n * Matches *\\/*.ts globs\n */\n")

    def test_line_style_keeps_comment_terminator(self):
        doc = CommentBuilder("line")
        doc.add("Matches */*.ts globs")
        self.assertEqual(doc.end(), "// Matches */*.ts globs\n")

    def test_fragments_render_in_add_order(self):
        doc = CommentBuilder("line")
        for text in ["c", "a", "b"]:
            doc.add(text)
        self.assertEqual(doc.end(), "// c\n// a\n// b\n")

    def test_unknown_style_is_rejected(self):
        with self.assertRaises(ValueError):
            CommentBuilder("docment")


def test_build_property_comment_order():
    comment = build_property_comment(
        "line",
        title="Title",
        description="Description",
        required=True,
        deprecated=True,
    )
    assert comment == "// [title] Title\n// Description\n// [required]\n// [deprecated]\n"


def test_build_property_comment_without_metadata():
    assert build_property_comment("block") == ""
