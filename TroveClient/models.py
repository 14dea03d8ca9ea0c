from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .errors import InvalidInputError, MissingInputError

MIN_VOLUME_SIZE = 1
MAX_VOLUME_SIZE = 300


# ---------------- Builder capabilities ----------------

@runtime_checkable
class CreateOptsBuilder(Protocol):
    def to_instance_create_map(self) -> Dict[str, Any]: ...


@runtime_checkable
class DatabasesBuilder(Protocol):
    """Anything that renders ``{"databases": [...]}``."""

    def to_db_create_map(self) -> Dict[str, Any]: ...


@runtime_checkable
class UsersBuilder(Protocol):
    """Anything that renders ``{"users": [...]}``."""

    def to_user_create_map(self) -> Dict[str, Any]: ...


# ---------------- Create options ----------------

@dataclass(frozen=True)
class DatastoreOpts:
    type: str = ""
    version: str = ""

    def to_map(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.type:
            out["type"] = self.type
        if self.version:
            out["version"] = self.version
        return out


@dataclass(frozen=True)
class NetworkOpts:
    # either uuid (network) or port is required by the service
    uuid: str = ""
    port: str = ""
    v4_fixed_ip: str = ""
    v6_fixed_ip: str = ""

    def to_map(self) -> Dict[str, Any]:
        wire = (
            ("net-id", self.uuid),
            ("port-id", self.port),
            ("v4-fixed-ip", self.v4_fixed_ip),
            ("v6-fixed-ip", self.v6_fixed_ip),
        )
        return {k: v for k, v in wire if v}


@dataclass(frozen=True)
class AccessOpts:
    is_public: bool = False
    allowed_cidrs: Sequence[str] = ()

    def to_map(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"is_public": bool(self.is_public)}
        if self.allowed_cidrs:
            out["allowed_cidrs"] = list(self.allowed_cidrs)
        return out


@dataclass(frozen=True)
class RestoreOpts:
    backup_ref: str = ""

    def validate(self) -> None:
        if not self.backup_ref:
            raise MissingInputError("restore_point.backup_ref")

    def to_map(self) -> Dict[str, Any]:
        self.validate()
        return {"backup_ref": self.backup_ref}


@dataclass(frozen=True)
class CreateOpts:
    """
    Options for provisioning a database instance.

    flavor_ref is the flavor id (or its URI) and size the volume size in GB
    (1-300); both are required. databases/users accept any builder exposing
    to_db_create_map()/to_user_create_map(). replica_count is only sent when
    greater than 1, the service defaults to a single replica.
    """

    flavor_ref: str
    size: int
    name: str = ""
    databases: Optional[DatabasesBuilder] = None
    users: Optional[UsersBuilder] = None
    datastore: Optional[DatastoreOpts] = None
    networks: Sequence[NetworkOpts] = ()
    access: Optional[AccessOpts] = None
    restore_point: Optional[RestoreOpts] = None
    replica_of: str = ""
    replica_count: int = 0

    def validate(self) -> None:
        if self.size > MAX_VOLUME_SIZE or self.size < MIN_VOLUME_SIZE:
            raise InvalidInputError(
                "instances.CreateOpts.Size",
                self.size,
                f"Size (GB) must be between {MIN_VOLUME_SIZE}-{MAX_VOLUME_SIZE}",
            )
        if not self.flavor_ref:
            raise MissingInputError("instances.CreateOpts.FlavorRef")

    def to_instance_create_map(self) -> Dict[str, Any]:
        self.validate()

        instance: Dict[str, Any] = {
            "volume": {"size": self.size},
            "flavorRef": self.flavor_ref,
        }
        if self.name:
            instance["name"] = self.name
        if self.databases is not None:
            instance["databases"] = self.databases.to_db_create_map()["databases"]
        if self.users is not None:
            instance["users"] = self.users.to_user_create_map()["users"]
        if self.datastore is not None:
            instance["datastore"] = self.datastore.to_map()
        if self.networks:
            instance["nics"] = [net.to_map() for net in self.networks]
        if self.access is not None:
            instance["access"] = self.access.to_map()
        if self.restore_point is not None:
            if not self.restore_point.backup_ref:
                raise MissingInputError("restore_point.backup_ref")
            instance["restorePoint"] = self.restore_point.to_map()
        if self.replica_of:
            instance["replica_of"] = self.replica_of
        if self.replica_count > 1:
            instance["replica_count"] = self.replica_count

        return {"instance": instance}


# ---------------- Decoded resources ----------------

@dataclass(frozen=True)
class Link:
    href: str
    rel: str


@dataclass(frozen=True)
class Flavor:
    id: str
    links: Tuple[Link, ...] = ()


@dataclass(frozen=True)
class Volume:
    size: Optional[int] = None
    used: Optional[float] = None


@dataclass(frozen=True)
class Address:
    type: str
    address: str


@dataclass(frozen=True)
class DatastorePartial:
    type: str
    version: str


@dataclass(frozen=True)
class Fault:
    message: str
    details: Optional[str] = None
    created: Optional[datetime] = None


@dataclass(frozen=True)
class Replica:
    id: str


@dataclass(frozen=True)
class Instance:
    id: str
    name: str
    status: str
    hostname: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    flavor: Optional[Flavor] = None
    volume: Optional[Volume] = None
    datastore: Optional[DatastorePartial] = None
    ip: Tuple[str, ...] = ()
    addresses: Tuple[Address, ...] = ()
    links: Tuple[Link, ...] = ()
    fault: Optional[Fault] = None
    replicas: Tuple[Replica, ...] = ()
    replica_of: Optional[Replica] = None


@dataclass(frozen=True)
class RootUser:
    name: str
    password: Optional[str] = None


def _parse_time(value: Any) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        return None


def _map_links(items: Any) -> Tuple[Link, ...]:
    return tuple(
        Link(href=str(l.get("href") or ""), rel=str(l.get("rel") or ""))
        for l in (items or [])
        if isinstance(l, dict)
    )


def map_instance(d: dict) -> Instance:
    fl = d.get("flavor")
    vol = d.get("volume")
    ds = d.get("datastore")
    fault = d.get("fault")
    rep_of = d.get("replica_of")

    size = vol.get("size") if isinstance(vol, dict) else None
    used = vol.get("used") if isinstance(vol, dict) else None

    return Instance(
        id=str(d.get("id") or ""),
        name=str(d.get("name") or ""),
        status=str(d.get("status") or ""),
        hostname=d.get("hostname"),
        created=_parse_time(d.get("created")),
        updated=_parse_time(d.get("updated")),
        flavor=(Flavor(id=str(fl.get("id") or ""), links=_map_links(fl.get("links"))) if isinstance(fl, dict) else None),
        volume=(Volume(size=int(size) if size is not None else None, used=float(used) if used is not None else None) if isinstance(vol, dict) else None),
        datastore=(DatastorePartial(type=str(ds.get("type") or ""), version=str(ds.get("version") or "")) if isinstance(ds, dict) else None),
        ip=tuple(str(i) for i in (d.get("ip") or [])),
        addresses=tuple(
            Address(type=str(a.get("type") or ""), address=str(a.get("address") or ""))
            for a in (d.get("addresses") or [])
            if isinstance(a, dict)
        ),
        links=_map_links(d.get("links")),
        fault=(Fault(message=str(fault.get("message") or ""), details=fault.get("details"), created=_parse_time(fault.get("created"))) if isinstance(fault, dict) else None),
        replicas=tuple(Replica(id=str(r.get("id") or "")) for r in (d.get("replicas") or []) if isinstance(r, dict)),
        replica_of=(Replica(id=str(rep_of.get("id") or "")) if isinstance(rep_of, dict) else None),
    )
