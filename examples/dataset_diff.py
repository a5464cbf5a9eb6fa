"""
Diff two small dataset snapshots and print the result.

Run this with:
    python examples/dataset_diff.py
"""

from hazojsondiff import ByteArrayBuffer, diff_dataset, diff_dataset_into

OLD = '{"taxons":[{"id":"t1","name":"Acanthaceae"}],"characters":[],"states":[],"books":[]}'
NEW = '{"taxons":[{"id":"t1","name":"Acanthaceae s.l."}],"characters":[],"states":[],"books":[{"id":"b1"}]}'


def main() -> None:
    print(diff_dataset(OLD, NEW))

    # Same diff written into a raw byte sink
    buf = ByteArrayBuffer()
    written = diff_dataset_into(OLD, NEW, buf)
    print(f"{written} bytes, capacity {buf.capacity}")


if __name__ == "__main__":
    main()
