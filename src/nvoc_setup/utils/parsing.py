from __future__ import annotations

from re import fullmatch


def parse_int(value: str) -> int:
  """Like int(), but only plain ASCII digits with an optional sign (no `1_0`, no other scripts' digits)."""
  text = value.strip()
  if not fullmatch(r"[+-]?[0-9]+", text):
    raise ValueError(f"not a valid integer: {value!r}")
  return int(text)
