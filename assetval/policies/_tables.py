"""Tag lookup shared by the table-driven policies."""

from typing import Mapping, Tuple


def normalize_tag(tag: object) -> str:
  """Lowercase, stripped form of an enumerated tag."""
  return str(tag).strip().lower()


def lookup(table: Mapping[str, float], tag: object,
           default_tag: str) -> Tuple[str, float, bool]:
  """
  Resolve a tag against a factor table.

  Args:
    table: Mapping of known tags to factors
    tag: Tag as supplied by the caller
    default_tag: Tag used when the supplied one is unknown

  Returns:
    Tuple of (resolved_tag, factor, defaulted)
  """
  key = normalize_tag(tag)
  if key in table:
    return key, table[key], False
  return default_tag, table[default_tag], True
