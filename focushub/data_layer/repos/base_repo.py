from typing import Generic, Optional, List, Dict, Any, Type, Tuple, Callable, Union
from focushub.data_layer.models.base_model import T
from focushub.data_layer.memory.store import MemoryStore, Collection
from focushub.utils.datetime_utils import get_utc_now
from pydantic import ValidationError
import logging

logger = logging.getLogger(__name__)

# Equality filter on document fields, or a predicate over the record model
Filter = Union[Dict[str, Any], Callable[[Any], bool], None]


class InvalidUpdateError(Exception):
    """An update would leave the stored document invalid; nothing was written."""

    def __init__(self, message: str, details: Optional[List[Dict]] = None):
        self.message = message
        self.details = details or []
        super().__init__(self.message)


class BaseMemoryRepository(Generic[T]):
    """Base repository for in-memory store operations with generic CRUD functionality."""

    def __init__(self, store: MemoryStore, model_class: Type[T]):
        """Initialize the repository with a store and a model class."""
        self.store = store
        self.model_class = model_class
        self.collection_name = model_class.collection_name
        self._model = model_class
        logger.debug(
            f"Initialized {self.__class__.__name__} for collection {self.collection_name}")

    @property
    def collection(self) -> Collection:
        """Get the store collection for this repository."""
        return self.store.get_collection(self.collection_name)

    @property
    def model(self) -> Type[T]:
        """Get the model class for this repository."""
        return self._model

    def _matches(self, doc: Dict[str, Any], filter: Filter) -> bool:
        if filter is None:
            return True
        if callable(filter):
            return filter(self.model_class.from_store(doc))
        return all(doc.get(key) == value for key, value in filter.items())

    def find_by_id(self, id: str) -> Optional[T]:
        """Find document by ID."""
        doc = self.collection.get(id)
        if doc is None:
            logger.debug(f"{self.collection_name}: no document with id {id}")
            return None
        return self.model_class.from_store(doc)

    def find_one(self, filter: Filter) -> Optional[T]:
        """Find one document by filter."""
        for doc in self.collection.values():
            if self._matches(doc, filter):
                return self.model_class.from_store(doc)
        return None

    def find_many(self,
                  filter: Filter = None,
                  skip: int = 0,
                  limit: Optional[int] = None,
                  sort: Optional[List[Tuple[str, int]]] = None) -> List[T]:
        """Find multiple documents with pagination and sorting.

        Without ``sort`` documents come back in insertion order. ``sort``
        takes ``(field, direction)`` pairs where direction is 1 or -1.
        """
        docs = [doc for doc in self.collection.values()
                if self._matches(doc, filter)]

        # Apply sorting if provided, least significant key first
        if sort:
            for field, direction in reversed(sort):
                docs.sort(key=lambda d: (d.get(field) is None, d.get(field)),
                          reverse=direction < 0)

        end = skip + limit if limit is not None else None
        return [self.model_class.from_store(doc) for doc in docs[skip:end]]

    def count(self, filter: Filter = None) -> int:
        """Count documents matching filter."""
        return sum(1 for doc in self.collection.values()
                   if self._matches(doc, filter))

    def insert(self, model: T) -> str:
        """Insert a new document."""
        data = model.dict_for_store()
        self.collection[data["id"]] = data
        logger.debug(f"Inserted {self.collection_name} document {data['id']}")
        return data["id"]

    def update(self, id: str, data: Dict[str, Any]) -> Optional[T]:
        """Shallow-merge ``data`` over the document with the given ID."""
        existing = self.collection.get(id)
        if existing is None:
            logger.warning(
                f"Update skipped, {self.collection_name} document not found: {id}")
            return None

        data = {k: v for k, v in data.items() if k not in ("id", "user_id")}

        # Set updated_at timestamp
        if "updated_at" in self.model_class.model_fields and "updated_at" not in data:
            data["updated_at"] = get_utc_now()

        try:
            merged = self.model_class(**{**existing, **data})
        except ValidationError as e:
            logger.warning(
                f"Rejected update of {self.collection_name} document {id}: {e.errors()}")
            raise InvalidUpdateError(
                f"Invalid update for {self.collection_name} document {id}",
                details=e.errors(include_url=False))
        self.collection[id] = merged.dict_for_store()
        return self.model_class.from_store(self.collection[id])

    def delete(self, id: str) -> bool:
        """Delete document by ID."""
        if id not in self.collection:
            logger.warning(
                f"Delete skipped, {self.collection_name} document not found: {id}")
            return False
        del self.collection[id]
        return True

    def delete_many(self, filter: Filter) -> int:
        """Delete documents by filter, return number of documents deleted."""
        ids = [doc_id for doc_id, doc in self.collection.items()
               if self._matches(doc, filter)]
        for doc_id in ids:
            del self.collection[doc_id]
        return len(ids)
