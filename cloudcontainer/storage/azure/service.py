import logging

from azure.core.credentials import AzureNamedKeyCredential
from azure.storage.blob import BlobServiceClient

from cloudcontainer.config import get_config
from cloudcontainer.storage.azure.container import AzureContainer
from cloudcontainer.storage.azure.errors import validate_account_key
from cloudcontainer.storage.interface.types import PublicAccessType


logger = logging.getLogger(__name__)


class AzureService:
    """
    Signed access to the blob endpoint of a single storage account.

    Building the service validates the account key and prepares the request pipeline, but performs no network
    call. Containers are retrieved by name through `containers`:

        >>> service = AzureService("myaccount", "bXlrZXk=")
        >>> container = service.containers["mycontainer"]
    """

    def __init__(self, account_name, account_key, user_agent=None):
        """
        Constructor of the service.

        :param account_name:
            Name of the storage account.

        :param account_key:
            Shared key of the storage account, base64 encoded.

        :param user_agent:
            User agent that tags every request. If not set, `blob.user_agent` from config is used.

        :raises CredentialError:
            If the account key is malformed.
        """
        config = get_config()

        validate_account_key(account_key)

        self._account_name = account_name
        self._endpoint = config['blob.endpoint_format'].format(account_name=account_name)
        self._user_agent = user_agent if user_agent is not None else config['blob.user_agent']

        credential = AzureNamedKeyCredential(account_name, account_key)
        self._blob_service = BlobServiceClient(self._endpoint, credential=credential, user_agent=self._user_agent)
        self._containers_handler = AzureContainersHandler(self)

        logger.debug("Blob service prepared for account '%s' at %s", account_name, self._endpoint)

    @property
    def containers(self):
        return self._containers_handler

    @property
    def service_raw(self):
        """
        Retrieves the original Azure Service client.
        """
        return self._blob_service

    @property
    def endpoint(self):
        return self._endpoint

    @property
    def user_agent(self):
        return self._user_agent

    @property
    def account_name(self):
        return self._account_name

    def __str__(self):
        return f"[Azure blob storage ({self.account_name}); endpoint: {self.endpoint}]"

    def __repr__(self):
        return str(self)


class AzureContainersHandler:

    def __init__(self, owner):
        self._owner = owner

    @property
    def owner(self):
        return self._owner

    def __getitem__(self, element):
        return self.get(element)

    def get(self, container_name, public_access=PublicAccessType.NONE):
        if type(container_name) is not str:
            raise KeyError("Type of container not understood. Try the name of the container (as a string).")

        return AzureContainer(self.owner, container_name, public_access=public_access)

    def __str__(self):
        return f"[Azure blob storage containers ({self.owner.account_name})]"

    def __repr__(self):
        return str(self)


def open_container(account_name, account_key, container_name, public_access=PublicAccessType.NONE) -> AzureContainer:
    """
    Builds a handle for the given container of the given storage account. No network call is made.

    :raises CredentialError:
        If the account key is malformed.
    """
    service = AzureService(account_name, account_key)
    return service.containers.get(container_name, public_access=public_access)
