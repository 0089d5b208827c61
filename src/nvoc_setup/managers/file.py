from __future__ import annotations

import os
from pwd import getpwnam


class FileManager:
  owner: str | None

  def __init__(self, owner: str | None = "root"):
    self.owner = owner

  def write(self, filename: str, content: str | bytes, mode: int = 0o644):
    """Creates or overwrites the file, creating missing parent directories."""
    self.mkdirs(os.path.dirname(filename))
    with open(filename, "wb") as fh:
      fh.write(self.bytes(content))
    self.chown(filename)
    os.chmod(filename, mode)
    assert mode == (os.stat(filename).st_mode & 0o777), "cannot apply file permissions (incompatible file system?)"

  def read(self, filename: str) -> str | None:
    if not os.path.isfile(filename):
      return None
    with open(filename, encoding = "utf-8") as fh:
      return fh.read()

  def mkdirs(self, dirname: str):
    if not dirname or os.path.exists(dirname): return
    if not os.path.exists(os.path.dirname(dirname)):
      self.mkdirs(os.path.dirname(dirname))
    os.mkdir(dirname)
    self.chown(dirname)

  def chown(self, path: str):
    if self.owner is None:
      return
    pwnam = getpwnam(self.owner)
    os.chown(path, uid = pwnam.pw_uid, gid = pwnam.pw_gid)

  @classmethod
  def bytes(cls, content: str | bytes) -> bytes:
    if isinstance(content, str):
      return content.encode("utf-8")
    else:
      return content
