from cloudcontainer.azure.factory import AzureFactory
from cloudcontainer.azure.credentials import AzureCredentials

__all__ = [
    "AzureFactory",
    "AzureCredentials"
]
