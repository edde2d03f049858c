from cloudcontainer.storage.azure import AzureContainer, AzureService
from cloudcontainer.storage.interface.types import PublicAccessType


class AzureFactory:
    """
    AzureFactory builds container handles out of a set of storage account credentials.

    Args:
        credentials (AzureCredentials): An instance of AzureCredentials containing the account name and key.
        singleton (bool, optional): If True, a single instance of AzureService is shared by every container handle
            built by this factory. If False, a new AzureService instance is created for each handle.
        user_agent (str, optional): User agent that tags every request. Defaults to `blob.user_agent` from config.

    Methods:
        container(container_name, public_access=PublicAccessType.NONE):
            Builds a handle over the given container of the storage account.

        service_storage:
            Property to get the AzureService instance for blob storage operations.

    Raises:
        CredentialError: When a service is built out of a malformed account key.

    Usage:
        credentials = AzureCredentials(account_name="myaccount", account_key="bXlrZXk=")
        factory = AzureFactory(credentials)

        container = factory.container("mycontainer")
        container.create(PublicAccessType.NONE)
    """
    def __init__(self, credentials, singleton=True, user_agent=None):
        self._credentials = credentials
        self._service_storage = None
        self._singleton = singleton
        self._user_agent = user_agent

    def container(self, container_name, public_access=PublicAccessType.NONE) -> AzureContainer:
        """
        Builds a handle over the given container of the storage account. No network call is made.

        Args:
            container_name (str): The name of the Azure Blob Storage container.
            public_access (PublicAccessType, optional): Public access type desired for the container.

        Returns:
            AzureContainer: A handle bound to the container.
        """
        return self.service_storage.containers.get(container_name, public_access=public_access)

    @property
    def service_storage(self) -> AzureService:
        credentials = self._credentials

        if not self._singleton:
            return AzureService(credentials.account_name, credentials.account_key, user_agent=self._user_agent)

        if self._service_storage is None:
            self._service_storage = AzureService(credentials.account_name, credentials.account_key,
                                                 user_agent=self._user_agent)

        return self._service_storage

    def __str__(self):
        return "Azure factory. Check methods to know which resources are available."

    def __repr__(self):
        return str(self)
