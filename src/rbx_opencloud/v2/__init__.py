"""Open Cloud v2 API."""

from .client import OpenCloudV2
from .datastore import DatastoreApi
from .groups import GroupsApi
from .models import Datastore, DatastoreEntry, GroupInfo, GroupMembership, GroupRole

__all__ = [
    "OpenCloudV2",
    "GroupsApi",
    "DatastoreApi",
    "GroupInfo",
    "GroupRole",
    "GroupMembership",
    "Datastore",
    "DatastoreEntry",
]
