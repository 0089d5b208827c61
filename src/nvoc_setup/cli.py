"""
Command line entry point (`nvoc-setup`, or `python -m nvoc_setup`).

Exit status: 0 on success (also for --help and a declined confirmation),
1 for fatal setup errors and interrupts, 2 for usage errors. End of input
at a value or confirmation prompt counts as an empty answer.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from nvoc_setup.config import SetupConfig
from nvoc_setup.core import NvocSetup
from nvoc_setup.items.gpu_profile import parse_index
from nvoc_setup.privileges import ensure_root
from nvoc_setup.utils.colors import Palette
from nvoc_setup.utils.parsing import parse_int
from nvoc_setup.utils.shell import Shell


def gpu_index(value: str) -> int:
  try:
    return parse_index(value)
  except ValueError:
    raise argparse.ArgumentTypeError(f"invalid GPU index: {value!r}")


def offset(value: str) -> int:
  try:
    return parse_int(value)
  except ValueError:
    raise argparse.ArgumentTypeError(f"invalid clock offset: {value!r}")


def watts(value: str) -> int:
  try:
    result = parse_int(value)
  except ValueError:
    raise argparse.ArgumentTypeError(f"invalid power limit: {value!r}")
  if result < 0:
    raise argparse.ArgumentTypeError(f"power limit must not be negative: {value!r}")
  return result


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog = "nvoc-setup",
    description = "Configure per-GPU nvidia_oc overclocking services. Without --index an interactive menu is shown.",
  )
  parser.add_argument("--index", type = gpu_index, default = None, metavar = "ID", help = "GPU index (e.g. 0)")
  parser.add_argument("--core", type = offset, default = None, metavar = "MHZ", help = "core clock offset")
  parser.add_argument("--mem", type = offset, default = None, metavar = "MHZ", help = "memory clock offset")
  parser.add_argument("--power", type = watts, default = None, metavar = "WATTS", help = "power limit in watts")
  parser.add_argument("-y", "--yes", action = "store_true", help = "skip confirmation")
  parser.add_argument("-v", "--verbose", action = "store_true", help = "print shell commands before running them")
  parser.add_argument("--no-color", action = "store_true", help = "disable colored output")
  return parser


def main(argv: Sequence[str] | None = None, config: SetupConfig | None = None, shell: Shell | None = None) -> int:
  args = list(sys.argv[1:] if argv is None else argv)
  config = config or SetupConfig()
  ensure_root(args, config.palette, reexec = config.reexec_with_sudo)

  options = build_parser().parse_args(args)
  if options.no_color:
    config.palette = Palette(enabled = False)
  shell = shell or Shell()
  shell.verbose = shell.verbose or options.verbose

  setup = NvocSetup(config, shell)
  try:
    return setup.run(
      index = options.index,
      core_offset = options.core,
      mem_offset = options.mem,
      power_limit_watts = options.power,
      yes = options.yes,
    )
  except AssertionError as e:
    setup.logger.error(f"Error: {e}")
    return 1


if __name__ == "__main__":
  sys.exit(main())
