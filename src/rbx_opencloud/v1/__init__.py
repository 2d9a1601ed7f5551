"""Open Cloud v1 API."""

from .client import OpenCloudV1
from .datastore import DatastoreApi
from .models import DatastoreEntry

__all__ = [
    "OpenCloudV1",
    "DatastoreApi",
    "DatastoreEntry",
]
