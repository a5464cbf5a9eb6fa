"""Tests for the dataset-level diff and its sink-writing variant."""

from __future__ import annotations

import unittest

from hazojsondiff.core.buffer import ByteArrayBuffer, TextBuffer
from hazojsondiff.core.errors import ErrorType, ParseError, PropertyMissingError
from hazojsondiff.dataset import DATASET_PROPERTIES, diff_dataset, diff_dataset_into

EMPTY = '{"taxons":[],"characters":[],"states":[],"books":[]}'


def _dataset(**sections: str) -> str:
    parts = {name: "[]" for name in DATASET_PROPERTIES}
    parts.update(sections)
    return "{" + ",".join(f'"{k}":{v}' for k, v in parts.items()) + "}"


class TestDiffDataset(unittest.TestCase):
    def test_no_diff_emits_empty_sections(self):
        self.assertEqual(
            '{"taxons":{"added":[],"removed":[]},'
            '"characters":{"added":[],"removed":[]},'
            '"states":{"added":[],"removed":[]},'
            '"books":{"added":[],"removed":[]}}',
            diff_dataset(EMPTY, EMPTY),
        )

    def test_added_taxon(self):
        result = diff_dataset(EMPTY, _dataset(taxons='[{"id":1}]'))
        self.assertIn('"taxons":{"added":[{"id":1}],"removed":[]}', result)

    def test_removed_book(self):
        result = diff_dataset(_dataset(books='[{"id":42}]'), EMPTY)
        self.assertIn('"books":{"added":[],"removed":[{"id":42}]}', result)

    def test_modified_state(self):
        result = diff_dataset(
            _dataset(states='[{"id":1,"name":"A"}]'),
            _dataset(states='[{"id":1,"name":"B"}]'),
        )
        self.assertIn(
            '"states":{"added":[],"removed":[],"modified":[{"name":{"old":"A","new":"B"}}]}',
            result,
        )

    def test_sections_follow_property_order(self):
        old = '{"books":[],"states":[],"characters":[],"taxons":[],"id":"x"}'
        result = diff_dataset(old, EMPTY)
        self.assertLess(result.index('"taxons"'), result.index('"books"'))
        self.assertNotIn('"id"', result)

    def test_equal_non_array_sections_give_empty_string(self):
        doc = '{"taxons":{},"characters":{},"states":{"a":1},"books":null}'
        self.assertEqual("", diff_dataset(doc, doc))

    def test_only_changed_sections_are_emitted(self):
        old = '{"taxons":{"a":1},"characters":{},"states":{},"books":{}}'
        new = '{"taxons":{"a":2},"characters":{},"states":{},"books":{}}'
        self.assertEqual(
            '{"taxons":{"modified":{"a":{"old":1,"new":2}}}}', diff_dataset(old, new)
        )

    def test_custom_properties(self):
        self.assertEqual(
            '{"items":{"added":[1],"removed":[]}}',
            diff_dataset('{"items":[]}', '{"items":[1]}', properties=("items",)),
        )

    def test_missing_property(self):
        old = '{"taxons":[],"characters":[],"states":[]}'
        with self.assertRaises(PropertyMissingError) as ctx:
            diff_dataset(old, EMPTY)
        self.assertEqual(ErrorType.PROPERTY_MISSING, ctx.exception.error_type)
        self.assertEqual("books", ctx.exception.property_name)
        self.assertEqual("old", ctx.exception.side)

    def test_missing_property_in_new(self):
        with self.assertRaises(PropertyMissingError) as ctx:
            diff_dataset(EMPTY, '{"taxons":[]}')
        self.assertEqual("characters", ctx.exception.property_name)
        self.assertEqual("new", ctx.exception.side)

    def test_null_section_counts_as_present(self):
        doc = '{"taxons":null,"characters":[],"states":[],"books":[]}'
        self.assertNotIn('"taxons"', diff_dataset(doc, doc))

    def test_non_object_root_lacks_every_property(self):
        with self.assertRaises(PropertyMissingError):
            diff_dataset("[]", EMPTY)

    def test_parse_error_propagates(self):
        with self.assertRaises(ParseError) as ctx:
            diff_dataset(EMPTY, '{"taxons":[]')
        self.assertEqual(ErrorType.INVALID_STRUCTURE_UNCLOSED, ctx.exception.error_type)


class TestDiffDatasetInto(unittest.TestCase):
    def test_writes_bytes_and_returns_length(self):
        buf = ByteArrayBuffer(1024)
        written = diff_dataset_into(EMPTY, _dataset(taxons='["é"]'), buf)
        expected = diff_dataset(EMPTY, _dataset(taxons='["é"]')).encode("utf-8")
        self.assertEqual(len(expected), written)
        self.assertEqual(expected, buf.getvalue())

    def test_text_sink(self):
        buf = TextBuffer()
        diff_dataset_into(EMPTY, EMPTY, buf)
        self.assertEqual(diff_dataset(EMPTY, EMPTY), buf.getvalue())

    def test_no_difference_writes_nothing(self):
        doc = '{"taxons":{},"characters":{},"states":{},"books":{}}'
        buf = ByteArrayBuffer()
        self.assertEqual(0, diff_dataset_into(doc, doc, buf))
        self.assertEqual(b"", buf.getvalue())

    def test_error_sentinels(self):
        cases = [
            ('{"taxons":[]}', -3),  # PROPERTY_MISSING
            ("{1:2}", -1),  # INVALID_STRUCTURE_OBJECT_KEY
            ('{"a"}', -2),  # INVALID_STRUCTURE_GENERAL
            ("[", -4),  # INVALID_STRUCTURE_UNCLOSED
            ("]", -5),  # INVALID_STRUCTURE_UNEXPECTED_TOKEN
            ("[1.2.3]", -6),  # INVALID_STRUCTURE_INVALID_NUMBER
        ]
        for doc, sentinel in cases:
            with self.subTest(doc=doc):
                buf = ByteArrayBuffer()
                self.assertEqual(sentinel, diff_dataset_into(doc, EMPTY, buf))
                self.assertEqual(0, len(buf))


if __name__ == "__main__":
    unittest.main()
