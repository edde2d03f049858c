from cloudcontainer.storage.azure.container import AzureContainer
from cloudcontainer.storage.azure.errors import CredentialError, classify_error, is_not_found
from cloudcontainer.storage.azure.service import AzureService, open_container

__all__ = [
    "AzureContainer",
    "AzureService",
    "CredentialError",
    "classify_error",
    "is_not_found",
    "open_container",
]
