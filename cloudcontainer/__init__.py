__version__ = "0.1.0"

from cloudcontainer.azure import AzureCredentials, AzureFactory
from cloudcontainer.storage.azure import (AzureContainer, AzureService, CredentialError, classify_error, is_not_found,
                                          open_container)
from cloudcontainer.storage.interface import ContainerOperations, ErrorKind, PublicAccessType

__all__ = [
    "__version__",
    "AzureCredentials",
    "AzureFactory",
    "AzureContainer",
    "AzureService",
    "ContainerOperations",
    "CredentialError",
    "ErrorKind",
    "PublicAccessType",
    "classify_error",
    "is_not_found",
    "open_container",
]
