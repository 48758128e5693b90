import unittest
from unittest.mock import MagicMock

from alignmate.components.align_declarations import (
    align_declarations_after_types_and_modifiers,
    corrected_offset,
    pad_declarations_to_align,
)
from alignmate.core.document import TextDocument
from alignmate.core.errors import DeclarationParseError
from alignmate.utils.settings import AlignmentSettings


def _align(code: str, parser=None, **settings) -> str:
    document = TextDocument.from_text(code)
    align_declarations_after_types_and_modifiers(
        document, settings=AlignmentSettings(**settings), parser=parser
    )
    return document.text()


class TestCorrectedOffset(unittest.TestCase):

    def test_zero_based_offset_becomes_one_based(self):
        self.assertEqual(corrected_offset(0, 0), 1)

    def test_insertions_shift_offsets(self):
        self.assertEqual(corrected_offset(10, 3), 14)

    def test_insertion_sequence(self):
        """Test that offsets follow a synthetic sequence of insertions made before them."""
        text = "int a;\nstring bb;\nlong ccc;"
        raw_offsets = [text.index("a;"), text.index("bb"), text.index("ccc")]
        document = TextDocument.from_text(text)
        inserted = 0
        for raw_offset in raw_offsets:
            live_offset = corrected_offset(raw_offset, inserted)
            self.assertEqual(document.normalized_text()[live_offset - 1], text[raw_offset])
            document.insert(document.offset_of(1, 1), "  ")
            inserted += 2


class TestPadDeclarationsToAlign(unittest.TestCase):

    def test_returns_inserted_count(self):
        document = TextDocument.from_text("int a;\nstring bb;\nlong ccc;")
        edit_point = document.create_edit_point()
        inserted = pad_declarations_to_align(edit_point, [5, 15, 24])
        self.assertEqual(inserted, 5)
        self.assertEqual(document.text(), "int    a;\nstring bb;\nlong   ccc;")


class TestAlignDeclarations(unittest.TestCase):

    def test_identifiers_are_aligned(self):
        self.assertEqual(
            _align("int a;\nstring bb;\nlong ccc;"),
            "int    a;\nstring bb;\nlong   ccc;",
        )

    def test_two_lines_are_untouched(self):
        code = "int a;\nstring bb;\n"
        self.assertEqual(_align(code), code)

    def test_later_groups_account_for_earlier_insertions(self):
        code = (
            "int a;\nstring bb;\nlong ccc;\n"
            "\n"
            "char d;\ndouble eeeeee;\nbool f;\n"
        )
        expected = (
            "int    a;\nstring bb;\nlong   ccc;\n"
            "\n"
            "char   d;\ndouble eeeeee;\nbool   f;\n"
        )
        self.assertEqual(_align(code), expected)

    def test_second_declaration_on_a_line_is_ignored(self):
        code = "int a; int b;\nstring bb;\nlong ccc;"
        self.assertEqual(_align(code), "int    a; int b;\nstring bb;\nlong   ccc;")

    def test_multiple_declarators(self):
        code = "int a, b;\nstring bb;\nlong ccc;"
        self.assertEqual(_align(code), "int    a, b;\nstring bb;\nlong   ccc;")

    def test_declarations_in_a_method_body(self):
        code = (
            "class Foo\n"
            "{\n"
            "    void Run()\n"
            "    {\n"
            "        int count = 0;\n"
            "        string name = null;\n"
            "        var total = 1;\n"
            "        Run();\n"
            "    }\n"
            "}\n"
        )
        expected = (
            "class Foo\n"
            "{\n"
            "    void Run()\n"
            "    {\n"
            "        int    count = 0;\n"
            "        string name = null;\n"
            "        var    total = 1;\n"
            "        Run();\n"
            "    }\n"
            "}\n"
        )
        self.assertEqual(_align(code), expected)

    def test_windows_line_endings_do_not_shift_offsets(self):
        code = "int a;\r\nstring bb;\r\nlong ccc;\r\n"
        self.assertEqual(
            _align(code), "int    a;\r\nstring bb;\r\nlong   ccc;\r\n"
        )

    def test_parser_receives_normalized_text(self):
        parser = MagicMock(return_value=[])
        _align("int a;\r\nstring bb;\r\n", parser=parser)
        parser.assert_called_once_with("int a;\nstring bb;\n")

    def test_unsorted_offsets_from_parser(self):
        """Test that offsets reported out of order are aligned top to bottom."""
        code = "int a;\nstring bb;\nlong ccc;"
        parser = MagicMock(return_value=[code.index("ccc"), code.index("a;"), code.index("bb")])
        self.assertEqual(_align(code, parser=parser), "int    a;\nstring bb;\nlong   ccc;")

    def test_parse_failure_leaves_document_unmodified(self):
        code = "int a;\nstring bb;\nlong ccc;\n}"
        document = TextDocument.from_text(code)
        with self.assertRaises(DeclarationParseError):
            align_declarations_after_types_and_modifiers(document, settings=AlignmentSettings())
        self.assertEqual(document.text(), code)

    def test_disabled_setting_is_a_no_op(self):
        parser = MagicMock(return_value=[])
        code = "int a;\nstring bb;\nlong ccc;"
        self.assertEqual(
            _align(code, parser=parser, vertically_align_after_types_and_modifiers=False),
            code,
        )
        parser.assert_not_called()

    def test_alignment_is_idempotent(self):
        code = "int a;\nstring bb;\nlong ccc;\n\nchar d;\ndouble eeeeee;\nbool f;\n"
        once = _align(code)
        self.assertEqual(_align(once), once)


if __name__ == "__main__":
    unittest.main()
