from __future__ import annotations

from nvoc_setup.utils.parsing import parse_int


def read_answer(message: str) -> str:
  """input(), with end of input read as an empty answer."""
  try:
    return input(message)
  except EOFError:
    print()
    return ""


def confirm(message: str) -> bool:
  answer = read_answer(f"{message} [y/N] ")
  return answer in ("y", "Y")


def prompt_int(message: str, default: int = 0, minimum: int | None = None) -> int:
  while True:
    answer = read_answer(message).strip()
    if answer == "":
      return default
    try:
      value = parse_int(answer)
    except ValueError:
      print(f"not a valid integer: {answer}")
      continue
    if minimum is not None and value < minimum:
      print(f"value must be at least {minimum}")
      continue
    return value
