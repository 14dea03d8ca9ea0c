from __future__ import annotations
from typing import Iterable, Optional
from .models import Instance, RootUser


def print_instances(rows: Iterable[Instance]) -> None:
    items = list(rows)
    if not items:
        print("No instances found.")
        return
    print(f"{'ID':<36}  {'NAME':<30}  {'STATUS':<12}  {'DATASTORE':<16}  {'FLAVOR':<10}  {'SIZE':>5}")
    print("-" * 120)
    for i in items:
        ds = f"{i.datastore.type} {i.datastore.version}".strip() if i.datastore else ""
        flavor = i.flavor.id if i.flavor else ""
        size = str(i.volume.size) if i.volume and i.volume.size is not None else "-"
        print(f"{i.id:<36}  {i.name:<30}  {i.status:<12}  {ds:<16}  {flavor:<10}  {size:>5}")


def print_instance(inst: Optional[Instance]) -> None:
    if not inst:
        print("No instance found.")
        return

    def _row(label: str, value) -> None:
        print(f"{label:<12} {'' if value is None else value}")

    _row("id", inst.id)
    _row("name", inst.name)
    _row("status", inst.status)
    _row("hostname", inst.hostname)
    _row("flavor", inst.flavor.id if inst.flavor else None)
    if inst.volume:
        used = f" (used {inst.volume.used:g})" if inst.volume.used is not None else ""
        _row("volume", f"{inst.volume.size} GB{used}")
    if inst.datastore:
        _row("datastore", f"{inst.datastore.type} {inst.datastore.version}")
    if inst.ip:
        _row("ip", ", ".join(inst.ip))
    for a in inst.addresses:
        _row("address", f"{a.address} ({a.type})")
    _row("created", inst.created.isoformat() if inst.created else None)
    _row("updated", inst.updated.isoformat() if inst.updated else None)
    if inst.replica_of:
        _row("replica_of", inst.replica_of.id)
    if inst.replicas:
        _row("replicas", ", ".join(r.id for r in inst.replicas))
    if inst.fault:
        _row("fault", inst.fault.message)


def print_root_user(user: RootUser) -> None:
    print(f"{'NAME':<16}  PASSWORD")
    print("-" * 60)
    print(f"{user.name:<16}  {user.password or ''}")
