import logging
from typing import Optional, Tuple

from cloudcontainer.storage.interface.container import ContainerOperations
from cloudcontainer.storage.interface.types import Metadata, PublicAccessType


logger = logging.getLogger(__name__)


_TO_AZURE_PUBLIC_ACCESS = {
    PublicAccessType.NONE: None,
    PublicAccessType.BLOB: "blob",
    PublicAccessType.CONTAINER: "container",
}

_FROM_AZURE_PUBLIC_ACCESS = {
    None: PublicAccessType.NONE,
    "off": PublicAccessType.NONE,
    "blob": PublicAccessType.BLOB,
    "container": PublicAccessType.CONTAINER,
}


def to_azure_public_access(public_access):
    if not isinstance(public_access, PublicAccessType):
        public_access = PublicAccessType(public_access)

    return _TO_AZURE_PUBLIC_ACCESS[public_access]


def from_azure_public_access(public_access):
    # The SDK may hand back either its own str enum or a plain string
    public_access = getattr(public_access, "value", public_access)

    if public_access is not None:
        public_access = str(public_access).lower()

    try:
        return _FROM_AZURE_PUBLIC_ACCESS[public_access]

    except KeyError:
        raise ValueError(f"Public access type '{public_access}' not understood.") from None


def empty_metadata_to_none(metadata) -> Optional[Metadata]:
    if not metadata:
        return None

    return dict(metadata)


class AzureContainer(ContainerOperations):
    """
    Handle over a single Azure Blob Storage container.

    Every operation is a blocking call to the backend. Errors raised by the Azure SDK are propagated as they are;
    use `is_not_found()` or `classify_error()` to inspect them. Extra keyword arguments (like `timeout`) are
    forwarded to the SDK call.
    """

    def __init__(self, service, container_name, public_access=PublicAccessType.NONE):
        """
        Constructor of the container.

        :param service:
            Service object that owns this container.

        :param container_name:
            Name of the container. Must be alphanumeric and lower-case, without special characters.

        :param public_access:
            Public access type desired by the owner of this handle.
        """
        if not isinstance(public_access, PublicAccessType):
            public_access = PublicAccessType(public_access)

        self._service = service
        self._container_name = container_name
        self._public_access = public_access
        self._account_name = service.account_name
        self._endpoint = service.endpoint
        self._client = service.service_raw.get_container_client(container_name)

    @property
    def service(self):
        return self._service

    @property
    def container_raw(self):
        """
        Retrieves the original Azure Container client.
        """
        return self._client

    @property
    def name(self):
        return self._container_name

    @property
    def account_name(self):
        return self._account_name

    @property
    def endpoint(self):
        return self._endpoint

    @property
    def url(self):
        return f"{self._endpoint}/{self._container_name}"

    @property
    def public_access(self):
        return self._public_access

    def create(self, public_access, metadata: Optional[Metadata] = None, **kwargs):
        """
        Creates the container in the backend.

        :param public_access:
            Public access type of the new container.

        :param metadata:
            Accepted for symmetry with `update()`, but NOT applied to the new container.
            Call `update()` after creating to set metadata.
        """
        logger.debug("Creating container '%s' (public access: %s)", self.url, public_access)
        self._client.create_container(public_access=to_azure_public_access(public_access), **kwargs)

    def update(self, public_access, metadata: Optional[Metadata] = None, **kwargs):
        """
        Sets the metadata and then the public access type of the container.

        The update is not atomic: if setting the public access fails, the metadata is already stored in the backend.
        If setting the metadata fails, the public access is not touched.

        :param public_access:
            New public access type.

        :param metadata:
            New metadata of the container. Replaces the existing one.
        """
        azure_public_access = to_azure_public_access(public_access)

        logger.debug("Updating metadata of container '%s'", self.url)
        self._client.set_container_metadata(metadata=metadata, **kwargs)

        logger.debug("Updating public access of container '%s' to %s", self.url, public_access)
        try:
            self._client.set_container_access_policy(signed_identifiers={}, public_access=azure_public_access,
                                                     **kwargs)

        except Exception:
            logger.warning("Container '%s' partially updated: metadata stored but public access may not be applied",
                           self.url)
            raise

    def get(self, **kwargs) -> Tuple[PublicAccessType, Optional[Metadata]]:
        """
        Retrieves the public access type and the metadata of the container.

        :return:
            Tuple (PublicAccessType, metadata). Metadata is None when the container has none.
        """
        logger.debug("Retrieving properties of container '%s'", self.url)
        properties = self._client.get_container_properties(**kwargs)

        return from_azure_public_access(properties.public_access), empty_metadata_to_none(properties.metadata)

    def delete(self, **kwargs):
        logger.debug("Deleting container '%s'", self.url)
        self._client.delete_container(**kwargs)

    def __str__(self):
        return f"[AzureBlobStorage Container; Name: '{self.name}'; Account: '{self.account_name}']"

    def __repr__(self):
        return str(self)
