"""Datastream operations."""

from __future__ import annotations

from .. import crud
from ..models.datastream import (
    DatastreamCreateConfig,
    DatastreamResponse,
    DatastreamScheduleConfig,
    DatastreamUpdateConfig,
)
from .base import TypedCollectionResource, build_path


class DatastreamsResource(
    TypedCollectionResource[DatastreamCreateConfig, DatastreamUpdateConfig, DatastreamResponse]
):
    """Datastreams under ``datastream-types/{type_id}/datastreams/``."""

    type_collection = "datastream-types"
    item_collection = "datastreams"
    response_type = DatastreamResponse

    def update_schedule(
        self, datastream_id: int, config: DatastreamScheduleConfig
    ) -> DatastreamResponse | None:
        """Patch scheduling fields only.

        This goes to ``datastreams/{id}/``, which is a different endpoint from
        the type-scoped path used by `update`.
        """
        return crud.update(
            self._client, build_path("datastreams", datastream_id), config, DatastreamResponse
        )
