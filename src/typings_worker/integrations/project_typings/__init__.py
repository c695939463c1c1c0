"""Typings resolution and project lifecycle collaborator."""

from typings_worker.integrations.project_typings.abc import InstallAction, ProjectTypings
from typings_worker.integrations.project_typings.fake import FakeProjectTypings
from typings_worker.integrations.project_typings.real import CacheProjectTypings

__all__ = ["CacheProjectTypings", "FakeProjectTypings", "InstallAction", "ProjectTypings"]
