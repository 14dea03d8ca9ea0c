from __future__ import annotations
from typing import List
from .settings import TroveSettings
from .client import TroveV1Client
from .models import CreateOptsBuilder, Instance, RootUser
from .errors import ApiError
from . import instances


class TroveClientApi:
    """
    High-level facade.
    - context-managed, checks settings on entry
    - returns dataclasses (Instance/RootUser) and raises ApiError subclasses
    - exposes the .instances service
    """

    def __init__(self, settings: TroveSettings, *, debug: bool = False) -> None:
        self.settings = settings
        self.client = TroveV1Client(
            endpoint=settings.endpoint,
            token=settings.token,
            project_id=settings.project_id,
            verify=settings.verify_tls,
            timeout=settings.timeout,
            debug=debug,
        )
        self.instances = _InstancesService(self)

    def __enter__(self) -> "TroveClientApi":
        if not self.settings.token:
            raise ApiError("Trove token missing (set TROVE_TOKEN or pass settings.token).")
        if not self.settings.endpoint:
            raise ApiError("Trove settings incomplete (need endpoint).")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.client.session.close()


class _InstancesService:
    def __init__(self, api: TroveClientApi) -> None:
        self.api = api

    @property
    def _client(self) -> TroveV1Client:
        return self.api.client

    def list(self) -> List[Instance]:
        out: List[Instance] = []
        for page in instances.list_instances(self._client):
            out.extend(page.extract_instances())
        return out

    def get(self, instance_id: str) -> Instance:
        return instances.get(self._client, instance_id).extract()

    def create(self, opts: CreateOptsBuilder) -> Instance:
        return instances.create(self._client, opts).extract()

    def delete(self, instance_id: str) -> None:
        instances.delete(self._client, instance_id).extract_err()

    def restart(self, instance_id: str) -> None:
        instances.restart(self._client, instance_id).extract_err()

    def resize(self, instance_id: str, flavor_ref: str) -> None:
        instances.resize(self._client, instance_id, flavor_ref).extract_err()

    def resize_volume(self, instance_id: str, size: int) -> None:
        instances.resize_volume(self._client, instance_id, size).extract_err()

    def enable_root(self, instance_id: str) -> RootUser:
        return instances.enable_root_user(self._client, instance_id).extract()

    def root_enabled(self, instance_id: str) -> bool:
        return instances.is_root_enabled(self._client, instance_id).extract()

    def attach_configuration(self, instance_id: str, config_id: str) -> None:
        instances.attach_configuration_group(self._client, instance_id, config_id).extract_err()

    def detach_configuration(self, instance_id: str) -> None:
        instances.detach_configuration_group(self._client, instance_id).extract_err()

    def detach_replica(self, instance_id: str, replica_of: str) -> None:
        instances.detach_replica(self._client, instance_id, replica_of).extract_err()
