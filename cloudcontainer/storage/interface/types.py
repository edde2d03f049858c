from enum import Enum
from typing import Dict


Metadata = Dict[str, str]


class PublicAccessType(Enum):
    """
    Anonymous read policy of a container.

    - NONE       -> no anonymous access.
    - BLOB       -> anonymous read of blobs, but not of the container listing.
    - CONTAINER  -> anonymous read of blobs and of the container listing.
    """
    NONE = "none"
    BLOB = "blob"
    CONTAINER = "container"


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"
