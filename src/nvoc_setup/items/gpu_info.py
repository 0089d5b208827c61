from __future__ import annotations

import csv


class GpuInfo:
  index: str
  name: str
  power_draw: str
  power_limit: str

  def __init__(self, index: str, name: str, power_draw: str, power_limit: str):
    self.index = index
    self.name = name
    self.power_draw = power_draw
    self.power_limit = power_limit

  def __str__(self):
    return f"[{self.index}] {self.name} - draw: {self.power_draw}, limit: {self.power_limit}"


def parse_gpu_list(output: str) -> list[GpuInfo]:
  """Parses `nvidia-smi --query-gpu=index,name,power.draw,power.limit --format=csv,noheader`."""
  result: list[GpuInfo] = []
  for row in csv.reader(output.splitlines(), skipinitialspace = True):
    if len(row) != 4:
      continue
    result.append(GpuInfo(*[field.strip() for field in row]))
  return result
