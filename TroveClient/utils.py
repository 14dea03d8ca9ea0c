from __future__ import annotations
import argparse
import ipaddress
from .models import NetworkOpts

_NIC_KEYS = {
    "net-id": "uuid",
    "port-id": "port",
    "v4-fixed-ip": "v4_fixed_ip",
    "v6-fixed-ip": "v6_fixed_ip",
}

def str_to_bool(value: str) -> bool:
    if isinstance(value, bool):
        return value
    v = value.lower()
    if v in ("true", "t", "yes", "y", "1"):
        return True
    if v in ("false", "f", "no", "n", "0"):
        return False
    raise argparse.ArgumentTypeError("expected boolean value (true/false)")

def parse_nic(value: str) -> NetworkOpts:
    """Parse 'net-id=<uuid>,v4-fixed-ip=<ip>' style NIC specs."""
    fields = {}
    for token in (value or "").split(","):
        token = token.strip()
        if not token:
            continue
        key, sep, val = token.partition("=")
        if not sep or key not in _NIC_KEYS or not val:
            raise argparse.ArgumentTypeError(
                f"invalid NIC spec {value!r}; expected key=value pairs with keys {', '.join(_NIC_KEYS)}"
            )
        fields[_NIC_KEYS[key]] = val
    if not fields.get("uuid") and not fields.get("port"):
        raise argparse.ArgumentTypeError(f"NIC spec {value!r} needs net-id or port-id")
    return NetworkOpts(**fields)

def canonicalize_cidr(cidr: str) -> str:
    try:
        net = ipaddress.ip_network(cidr, strict=False)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid CIDR {cidr!r}: {exc}")
    return str(net)
