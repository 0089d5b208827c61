from __future__ import annotations

from typing import Any

from nvoc_setup.utils.parsing import parse_int

CORE_KEY = "NV_CORE_OFFSET"
MEM_KEY = "NV_MEM_OFFSET"
POWER_KEY = "NV_POWER_LIMIT"


def parse_index(value: str) -> int:
  index = parse_int(value)
  if index < 0:
    raise ValueError(f"GPU index must not be negative: {value}")
  return index


class GpuProfile:
  """Tuning parameters for one GPU, as persisted in its EnvironmentFile."""
  index: int
  core_offset: int
  mem_offset: int
  power_limit_mw: int

  def __init__(self, index: int, core_offset: int = 0, mem_offset: int = 0, power_limit_mw: int = 0):
    assert power_limit_mw >= 0, f"power limit must not be negative: {power_limit_mw}"
    self.index = index
    self.core_offset = core_offset
    self.mem_offset = mem_offset
    self.power_limit_mw = power_limit_mw

  @classmethod
  def from_watts(cls, index: int, core_offset: int, mem_offset: int, power_limit_watts: int) -> GpuProfile:
    return cls(
      index = index,
      core_offset = core_offset,
      mem_offset = mem_offset,
      power_limit_mw = power_limit_watts * 1000,
    )

  @classmethod
  def parse(cls, index: int, content: str) -> GpuProfile:
    """Reads back a file written by env_content(). Raises ValueError if a key is missing or a value is out of range."""
    values: dict[str, str] = {}
    for line in content.splitlines():
      line = line.strip()
      if not line or line.startswith("#"):
        continue
      key, separator, value = line.partition("=")
      if separator:
        values[key.strip()] = value.strip()
    missing = [key for key in (CORE_KEY, MEM_KEY, POWER_KEY) if key not in values]
    if missing:
      raise ValueError(f"missing key(s): {', '.join(missing)}")
    power_limit_mw = parse_int(values[POWER_KEY])
    if power_limit_mw < 0:
      raise ValueError(f"negative power limit: {power_limit_mw}")
    return cls(
      index = index,
      core_offset = parse_int(values[CORE_KEY]),
      mem_offset = parse_int(values[MEM_KEY]),
      power_limit_mw = power_limit_mw,
    )

  @property
  def power_limit_watts(self) -> str:
    watts, milliwatts = divmod(self.power_limit_mw, 1000)
    return str(watts) if not milliwatts else f"{watts}.{milliwatts:03d}".rstrip("0")

  def env_content(self, instance: str) -> str:
    return "\n".join([
      f"# Configuration for {instance}",
      f"{CORE_KEY}={self.core_offset}",
      f"{MEM_KEY}={self.mem_offset}",
      f"{POWER_KEY}={self.power_limit_mw}",
    ]) + "\n"

  def summary(self) -> list[str]:
    return [
      f"Core:  {self.core_offset} MHz",
      f"Mem:   {self.mem_offset} MHz",
      f"Power: {self.power_limit_watts} W ({self.power_limit_mw} mW)",
    ]

  def describe(self) -> str:
    return f"core {self.core_offset} MHz, mem {self.mem_offset} MHz, power {self.power_limit_watts} W"

  def __eq__(self, other: Any) -> bool:
    return (
      isinstance(other, GpuProfile)
      and self.index == other.index
      and self.core_offset == other.core_offset
      and self.mem_offset == other.mem_offset
      and self.power_limit_mw == other.power_limit_mw
    )
