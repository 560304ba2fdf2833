"""Workspace ("stack") operations."""

from __future__ import annotations

from .. import crud
from ..models.workspace import WorkspaceConfig, WorkspaceResponse
from .base import ResourceBase, build_path

STACKS = "stacks"


class WorkspacesResource(ResourceBase):
    """Manage workspaces; items are addressed by slug rather than numeric id."""

    def create(self, config: WorkspaceConfig) -> WorkspaceResponse | None:
        return crud.create(self._client, build_path(STACKS), config, WorkspaceResponse)

    def read(self, slug: str) -> WorkspaceResponse | None:
        return crud.read(self._client, build_path(STACKS, slug), WorkspaceResponse)

    def update(self, slug: str, config: WorkspaceConfig) -> WorkspaceResponse | None:
        return crud.update(self._client, build_path(STACKS, slug), config, WorkspaceResponse)

    def delete(self, slug: str) -> WorkspaceResponse | None:
        return crud.delete(self._client, build_path(STACKS, slug), WorkspaceResponse)
