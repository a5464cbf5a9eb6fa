"""
hazojsondiff version constants.

The diff output format is versioned separately from the library so that
consumers can detect a change in fragment shape.
"""

# Library version (matches pyproject.toml)
HAZOJSONDIFF_VERSION = "0.2.0"

# Version of the diff fragment format (section keys and ordering)
DIFF_FORMAT_VERSION = "diff_v1"
