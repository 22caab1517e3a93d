"""
Tests for span splicing.
"""

import pytest

from solid_switcheroo.core.edits import EditList
from solid_switcheroo.errors import EditOverlapError

SOURCE = b"abcdefghij"


def test_no_edits_returns_window():
  assert EditList().apply(SOURCE) == "abcdefghij"
  assert EditList().apply(SOURCE, 2, 5) == "cde"


def test_replacements_are_applied_in_offset_order():
  edits = EditList()
  edits.replace_span(6, 8, "X")
  edits.replace_span(1, 3, "Y")
  assert edits.apply(SOURCE) == "aYdefXij"


def test_insertions_keep_recording_order():
  edits = EditList()
  edits.insert(2, "1")
  edits.insert(2, "2")
  edits.replace_span(2, 4, "Z")
  assert edits.apply(SOURCE) == "ab12Zefghij"


def test_window_offsets():
  edits = EditList()
  edits.replace_span(3, 4, "_")
  assert edits.apply(SOURCE, 2, 6) == "c_ef"


def test_overlap_is_rejected():
  edits = EditList()
  edits.replace_span(1, 5, "A")
  edits.replace_span(3, 6, "B")
  with pytest.raises(EditOverlapError):
    edits.apply(SOURCE)


def test_edit_outside_window_is_rejected():
  edits = EditList()
  edits.replace_span(1, 3, "A")
  with pytest.raises(EditOverlapError):
    edits.apply(SOURCE, 2, 6)
