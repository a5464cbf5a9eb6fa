import unittest

from hazojsondiff import (
    ByteArrayBuffer,
    DiffPolicy,
    diff,
    diff_dataset,
    diff_dataset_into,
    parse,
    render,
)

OLD = """{
  "id": "Antremaplante61",
  "taxons": [{"id": "t1", "name": "Acanthaceae", "children": []}],
  "characters": [{"id": "c1", "states": ["s1", "s2"]}],
  "states": [{"id": "s1", "name": "red"}, {"id": "s2", "name": "blue"}],
  "books": [{"id": "b1"}]
}"""

NEW = """{
  "id": "Antremaplante61",
  "taxons": [{"id": "t1", "name": "Acanthaceae", "children": ["t2"]},
             {"id": "t2", "name": "Justicia", "children": []}],
  "characters": [{"id": "c1", "states": ["s1", "s2"]}],
  "states": [{"id": "s1", "name": "red"}, {"id": "s2", "name": "green"}],
  "books": []
}"""


class SmokeTest(unittest.TestCase):
    def test_dataset_diff(self) -> None:
        self.assertEqual(
            '{"taxons":{"added":[{"id":"t2","name":"Justicia","children":[]}],'
            '"removed":[],"modified":[{"children":{"added":["t2"],"removed":[]}}]},'
            '"characters":{"added":[],"removed":[]},'
            '"states":{"added":[],"removed":[],"modified":[{"name":{"old":"blue","new":"green"}}]},'
            '"books":{"added":[],"removed":[{"id":"b1"}]}}',
            diff_dataset(OLD, NEW),
        )

    def test_byte_sink_matches_text(self) -> None:
        buf = ByteArrayBuffer()
        written = diff_dataset_into(OLD, NEW, buf)
        self.assertEqual(diff_dataset(OLD, NEW).encode("utf-8"), buf.getvalue())
        self.assertEqual(written, len(buf))

    def test_parse_render_diff(self) -> None:
        old = parse(OLD)
        self.assertIsNone(diff(old, parse(render(old)), DiffPolicy.dataset()))


if __name__ == "__main__":
    unittest.main()
