from cloudcontainer.storage.interface.types import PublicAccessType, ErrorKind
from cloudcontainer.storage.interface.container import ContainerOperations

__all__ = [
    "PublicAccessType",
    "ErrorKind",
    "ContainerOperations",
]
