from typing import Optional, Tuple

from cloudcontainer.storage.interface.types import Metadata, PublicAccessType


class ContainerOperations:
    """
    Operations available on a single remote container.

    Implementations are bound to one container of one storage account for their whole life.
    """

    def create(self, public_access, metadata: Optional[Metadata] = None, **kwargs):
        raise NotImplementedError("")

    def update(self, public_access, metadata: Optional[Metadata] = None, **kwargs):
        raise NotImplementedError("")

    def get(self, **kwargs) -> Tuple[PublicAccessType, Optional[Metadata]]:
        raise NotImplementedError("")

    def delete(self, **kwargs):
        raise NotImplementedError("")

    def __str__(self):
        raise NotImplementedError("")

    def __repr__(self):
        raise NotImplementedError("")
