"""
Generated-name synthesis.

Every name the engine invents (temporary element tags, materialised copies of
effect dependencies, the pre-pass function name) is derived from a base name
by appending ``_`` until it no longer occurs in the text it must not collide
with.
"""

from typing import Iterable

SUFFIX = "_"


def unique_name(base: str, *haystacks: str, reserved: Iterable[str] = ()) -> str:
  """
  Returns `base` extended with `SUFFIX` until it is absent from every haystack.

  Args:
      base (str): The preferred name.
      *haystacks (str): Texts the name must not occur in (substring check).
      reserved (Iterable[str]): Names the result must not equal.

  Returns:
      str: The first collision-free candidate.
  """
  taken = set(reserved)
  candidate = base
  while candidate in taken or any(candidate in text for text in haystacks):
    candidate += SUFFIX
  return candidate
