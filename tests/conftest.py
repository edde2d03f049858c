"""Shared fixtures: an in-memory stand-in for the Azure SDK container client."""

from types import SimpleNamespace

import pytest
from azure.core.exceptions import HttpResponseError, ResourceExistsError, ResourceNotFoundError

from cloudcontainer.storage.azure.container import AzureContainer


VALID_KEY = "c2VjcmV0LWFjY291bnQta2V5"


def http_error(status_code, cls=HttpResponseError):
    """Build an Azure SDK error carrying the given HTTP status."""
    error = cls(message=f"status {status_code}")
    error.status_code = status_code
    return error


class FakeContainerClient:
    """Mimics the subset of azure.storage.blob.ContainerClient used by AzureContainer."""

    def __init__(self, container_name):
        self.container_name = container_name
        self.exists = False
        self.public_access = None
        self.metadata = {}
        self.calls = []
        self.failures = {}

    def fail(self, method, error):
        self.failures[method] = error

    def _record(self, method, **kwargs):
        self.calls.append((method, kwargs))
        if method in self.failures:
            raise self.failures[method]

    def _require_exists(self):
        if not self.exists:
            raise http_error(404, ResourceNotFoundError)

    def create_container(self, metadata=None, public_access=None, **kwargs):
        self._record("create_container", metadata=metadata, public_access=public_access, **kwargs)
        if self.exists:
            raise http_error(409, ResourceExistsError)
        self.exists = True
        self.public_access = public_access
        self.metadata = dict(metadata or {})

    def set_container_metadata(self, metadata=None, **kwargs):
        self._record("set_container_metadata", metadata=metadata, **kwargs)
        self._require_exists()
        self.metadata = dict(metadata or {})

    def set_container_access_policy(self, signed_identifiers, public_access=None, **kwargs):
        self._record("set_container_access_policy", signed_identifiers=signed_identifiers,
                     public_access=public_access, **kwargs)
        self._require_exists()
        self.public_access = public_access

    def get_container_properties(self, **kwargs):
        self._record("get_container_properties", **kwargs)
        self._require_exists()
        return SimpleNamespace(name=self.container_name, public_access=self.public_access,
                               metadata=dict(self.metadata))

    def delete_container(self, **kwargs):
        self._record("delete_container", **kwargs)
        self._require_exists()
        self.exists = False

    def method_names(self):
        return [name for name, _ in self.calls]


class FakeService:
    """Duck-typed AzureService handing out fake container clients."""

    def __init__(self, account_name="myaccount"):
        self.account_name = account_name
        self.endpoint = f"https://{account_name}.blob.core.windows.net"
        self.clients = {}
        self.service_raw = SimpleNamespace(get_container_client=self._get_container_client)

    def _get_container_client(self, container_name):
        return self.clients.setdefault(container_name, FakeContainerClient(container_name))


@pytest.fixture
def fake_service():
    return FakeService()


@pytest.fixture
def container(fake_service):
    return AzureContainer(fake_service, "mycontainer")


@pytest.fixture
def client(container):
    return container.container_raw
