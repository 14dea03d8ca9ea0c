"""
Database instance operations.

Each function sends exactly one request through the given service client and
returns a result object; errors land in result.err instead of being raised.
Nothing here retries or waits for an instance to change state.
"""
from __future__ import annotations
from typing import List

from .errors import ApiError
from .models import CreateOptsBuilder, Instance, map_instance
from .pagination import LinkedPage, Pager
from .results import (
    ActionResult,
    ConfigurationResult,
    CreateResult,
    DeleteResult,
    DetachReplicaResult,
    EnableRootUserResult,
    GetResult,
    IsRootEnabledResult,
    Result,
)


def base_url(client) -> str:
    return client.url("instances")


def resource_url(client, instance_id: str) -> str:
    return client.url("instances", instance_id)


def user_root_url(client, instance_id: str) -> str:
    return client.url("instances", instance_id, "root")


def action_url(client, instance_id: str) -> str:
    return client.url("instances", instance_id, "action")


class InstancePage(LinkedPage):
    resource_key = "instances"

    def extract_instances(self) -> List[Instance]:
        return [map_instance(i) for i in self.items()]


def _send(result: Result, fn, *args, **kwargs) -> Result:
    try:
        result.body, result.headers = fn(*args, **kwargs)
    except ApiError as exc:
        result.err = exc
    return result


def create(client, opts: CreateOptsBuilder) -> CreateResult:
    """
    Provision a new instance. Options are rendered (and validated) first; a
    rendering error, whatever its type, is returned in err unchanged and the
    service is never contacted.
    """
    r = CreateResult()
    try:
        body = opts.to_instance_create_map()
    except Exception as exc:
        r.err = exc
        return r
    return _send(r, client.post, base_url(client), body, ok_codes=[200])


def list_instances(client) -> Pager:
    return Pager(client, base_url(client), InstancePage)


def get(client, instance_id: str) -> GetResult:
    return _send(GetResult(), client.get, resource_url(client, instance_id))


def delete(client, instance_id: str) -> DeleteResult:
    return _send(DeleteResult(), client.delete, resource_url(client, instance_id))


def enable_root_user(client, instance_id: str) -> EnableRootUserResult:
    """Enable root login from any host; the result carries the generated password."""
    return _send(EnableRootUserResult(), client.post, user_root_url(client, instance_id), None, ok_codes=[200])


def is_root_enabled(client, instance_id: str) -> IsRootEnabledResult:
    return _send(IsRootEnabledResult(), client.get, user_root_url(client, instance_id))


def restart(client, instance_id: str) -> ActionResult:
    """Restart the database service only; dynamic settings made inside the database are lost."""
    body = {"restart": {}}
    return _send(ActionResult(), client.post, action_url(client, instance_id), body)


def resize(client, instance_id: str, flavor_ref: str) -> ActionResult:
    body = {"resize": {"flavorRef": flavor_ref}}
    return _send(ActionResult(), client.post, action_url(client, instance_id), body)


def resize_volume(client, instance_id: str, size: int) -> ActionResult:
    # the service only grows volumes
    body = {"resize": {"volume": {"size": size}}}
    return _send(ActionResult(), client.post, action_url(client, instance_id), body)


def attach_configuration_group(client, instance_id: str, config_id: str) -> ConfigurationResult:
    body = {"instance": {"configuration": config_id}}
    return _send(ConfigurationResult(), client.put, resource_url(client, instance_id), body, ok_codes=[202])


def detach_configuration_group(client, instance_id: str) -> ConfigurationResult:
    body = {"instance": {}}
    return _send(ConfigurationResult(), client.put, resource_url(client, instance_id), body, ok_codes=[202])


def detach_replica(client, instance_id: str, replica_of: str) -> DetachReplicaResult:
    body = {"instance": {"replica_of": replica_of}}
    return _send(DetachReplicaResult(), client.put, resource_url(client, instance_id), body, ok_codes=[202])
