"""Common helpers for resource wrappers."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar
from urllib.parse import quote, urljoin

from .. import crud
from ..models.base import Page, RequestModel, ResponseModel

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import AdverityClient

CreateT = TypeVar("CreateT", bound=RequestModel)
UpdateT = TypeVar("UpdateT", bound=RequestModel)
ResponseT = TypeVar("ResponseT", bound=ResponseModel)
ItemT = TypeVar("ItemT", bound=ResponseModel)


def build_path(*segments: object) -> str:
    """Join path segments into a relative API path ending in ``/``.

    Identifiers are percent-quoted so a slug can never add path levels.
    """
    return "".join(f"{quote(str(segment), safe='')}/" for segment in segments)


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: AdverityClient) -> None:
        self._client = client


class TypedCollectionResource(ResourceBase, Generic[CreateT, UpdateT, ResponseT]):
    """CRUD for resources nested under a type: ``<types>/{type_id}/<items>/{id}/``."""

    type_collection: ClassVar[str]
    item_collection: ClassVar[str]
    response_type: ClassVar[type[ResponseModel]]

    def collection_path(self, type_id: int) -> str:
        return build_path(self.type_collection, type_id, self.item_collection)

    def item_path(self, type_id: int, item_id: int) -> str:
        return build_path(self.type_collection, type_id, self.item_collection, item_id)

    def create(self, type_id: int, config: CreateT) -> ResponseT | None:
        return crud.create(  # type: ignore[return-value]
            self._client, self.collection_path(type_id), config, self.response_type
        )

    def read(self, type_id: int, item_id: int) -> ResponseT | None:
        return crud.read(  # type: ignore[return-value]
            self._client, self.item_path(type_id, item_id), self.response_type
        )

    def update(self, type_id: int, item_id: int, config: UpdateT) -> ResponseT | None:
        return crud.update(  # type: ignore[return-value]
            self._client, self.item_path(type_id, item_id), config, self.response_type
        )

    def delete(self, type_id: int, item_id: int) -> ResponseT | None:
        return crud.delete(  # type: ignore[return-value]
            self._client, self.item_path(type_id, item_id), self.response_type
        )


class TypeCatalogResource(ResourceBase, Generic[ItemT]):
    """Search a read-only ``*-types/`` catalog."""

    collection: ClassVar[str]
    page_type: ClassVar[type[Page]]

    def query(self, search: str) -> list[ItemT]:
        """Return the first page of matches; ``next``/``previous`` are discarded."""

        page = self._read_page(build_path(self.collection), {"search": search})
        if page is None:
            return []
        return list(page.results)

    def query_all(self, search: str) -> list[ItemT]:
        """Return every match, following ``next`` links until the listing ends.

        Links may be absolute, root-relative or relative; each one is resolved
        against the URL of the page that carried it.
        """

        results: list[ItemT] = []
        seen: set[str] = set()
        url = urljoin(self._client.endpoint, build_path(self.collection))
        page = self._read_page(url, {"search": search})
        while page is not None:
            results.extend(page.results)
            if not page.next:
                break
            url = urljoin(url, page.next)
            if url in seen:
                break
            seen.add(url)
            page = self._read_page(url, None)
        return results

    def _read_page(self, path: str, params: dict[str, str] | None) -> Page | None:
        return crud.read(self._client, path, self.page_type, params=params)


__all__ = ["ResourceBase", "TypeCatalogResource", "TypedCollectionResource", "build_path"]
