"""Filesystem primitives integration."""

from typings_worker.integrations.filesystem.abc import Filesystem
from typings_worker.integrations.filesystem.fake import FakeFilesystem
from typings_worker.integrations.filesystem.real import RealFilesystem

__all__ = ["FakeFilesystem", "Filesystem", "RealFilesystem"]
