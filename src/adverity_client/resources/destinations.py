"""Destination ("target") and destination mapping operations."""

from __future__ import annotations

from .. import crud
from ..models.destination import (
    DestinationConfig,
    DestinationMappingConfig,
    DestinationMappingResponse,
    DestinationResponse,
)
from .base import ResourceBase, TypedCollectionResource, build_path

TARGET_TYPES = "target-types"
TARGETS = "targets"
MAPPINGS = "mappings"


class DestinationsResource(
    TypedCollectionResource[DestinationConfig, DestinationConfig, DestinationResponse]
):
    """Destinations under ``target-types/{type_id}/targets/``."""

    type_collection = TARGET_TYPES
    item_collection = TARGETS
    response_type = DestinationResponse


class DestinationMappingsResource(ResourceBase):
    """Map datastreams to destination tables."""

    def collection_path(self, destination_type_id: int, destination_id: int) -> str:
        return build_path(TARGET_TYPES, destination_type_id, TARGETS, destination_id, MAPPINGS)

    def item_path(self, destination_type_id: int, destination_id: int, mapping_id: int) -> str:
        return build_path(
            TARGET_TYPES, destination_type_id, TARGETS, destination_id, MAPPINGS, mapping_id
        )

    def create(
        self, destination_type_id: int, destination_id: int, config: DestinationMappingConfig
    ) -> DestinationMappingResponse | None:
        path = self.collection_path(destination_type_id, destination_id)
        return crud.create(self._client, path, config, DestinationMappingResponse)

    def read(
        self, destination_type_id: int, destination_id: int, mapping_id: int
    ) -> DestinationMappingResponse | None:
        path = self.item_path(destination_type_id, destination_id, mapping_id)
        return crud.read(self._client, path, DestinationMappingResponse)

    def update(
        self,
        destination_type_id: int,
        destination_id: int,
        mapping_id: int,
        config: DestinationMappingConfig,
    ) -> DestinationMappingResponse | None:
        path = self.item_path(destination_type_id, destination_id, mapping_id)
        return crud.update(self._client, path, config, DestinationMappingResponse)

    def delete(
        self, destination_type_id: int, destination_id: int, mapping_id: int
    ) -> DestinationMappingResponse | None:
        path = self.item_path(destination_type_id, destination_id, mapping_id)
        return crud.delete(self._client, path, DestinationMappingResponse)
