from __future__ import annotations

import argparse
import sys

from .settings import TroveSettings
from .api import TroveClientApi
from .models import AccessOpts, CreateOpts, DatastoreOpts, RestoreOpts
from .utils import str_to_bool, parse_nic, canonicalize_cidr
from .errors import ApiError
from .formatters import print_instances, print_instance, print_root_user


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="OpenStack Trove database instance helper")

    p.add_argument("--endpoint", help="Trove v1.0 endpoint URL (env: TROVE_ENDPOINT)")
    p.add_argument("--token", help="Keystone token (env: TROVE_TOKEN)")
    p.add_argument("--project-id", help="Project ID appended to the endpoint (env: TROVE_PROJECT_ID)")
    p.add_argument("--timeout", type=float, help="HTTP timeout in seconds (env: TROVE_TIMEOUT)")
    p.add_argument("--insecure", action="store_true", help="Disable TLS certificate verification")
    p.add_argument("--debug", action="store_true", help="Enable verbose HTTP debugging")

    sp = p.add_subparsers(dest="command", required=True)

    sp.add_parser("list", help="List database instances")

    p_show = sp.add_parser("show", help="Show one database instance")
    p_show.add_argument("id")

    # create
    p_add = sp.add_parser("create", help="Provision a database instance")
    p_add.add_argument("--flavor", required=True, help="Flavor ID or URI")
    p_add.add_argument("--size", required=True, type=int, help="Volume size in GB (1-300)")
    p_add.add_argument("--name", default="")
    p_add.add_argument("--datastore-type", default="")
    p_add.add_argument("--datastore-version", default="")
    p_add.add_argument(
        "--nic",
        action="append",
        dest="nics",
        type=parse_nic,
        help="net-id=<uuid>|port-id=<uuid>[,v4-fixed-ip=<ip>][,v6-fixed-ip=<ip>] (repeatable)",
    )
    p_add.add_argument("--public", nargs="?", const=True, default=None, type=str_to_bool)
    p_add.add_argument("--allowed-cidr", action="append", dest="allowed_cidrs", type=canonicalize_cidr)
    p_add.add_argument("--backup", help="Backup ID to restore from")
    p_add.add_argument("--replica-of", default="", help="Source instance ID or name")
    p_add.add_argument("--replica-count", type=int, default=0)

    p_del = sp.add_parser("delete", help="Delete a database instance")
    p_del.add_argument("id")

    p_rst = sp.add_parser("restart", help="Restart the database service")
    p_rst.add_argument("id")

    p_res = sp.add_parser("resize", help="Resize flavor or volume")
    p_res.add_argument("id")
    g = p_res.add_mutually_exclusive_group(required=True)
    g.add_argument("--flavor", help="New flavor ID or URI")
    g.add_argument("--size", type=int, help="New volume size in GB")

    p_root = sp.add_parser("root", help="Show or enable the root user")
    p_root.add_argument("id")
    p_root.add_argument("--enable", action="store_true")

    p_cfg = sp.add_parser("configuration", help="Attach or detach a configuration group")
    p_cfg.add_argument("id")
    g2 = p_cfg.add_mutually_exclusive_group(required=True)
    g2.add_argument("--attach", metavar="CONFIG_ID")
    g2.add_argument("--detach", action="store_true")

    p_rep = sp.add_parser("detach-replica", help="Detach a replica from its source")
    p_rep.add_argument("id")
    p_rep.add_argument("--replica-of", required=True, help="Current replication source")

    return p


def _create_opts(args: argparse.Namespace) -> CreateOpts:
    datastore = None
    if args.datastore_type or args.datastore_version:
        datastore = DatastoreOpts(type=args.datastore_type, version=args.datastore_version)
    access = None
    if args.public is not None or args.allowed_cidrs:
        access = AccessOpts(is_public=bool(args.public), allowed_cidrs=tuple(args.allowed_cidrs or ()))
    return CreateOpts(
        flavor_ref=args.flavor,
        size=args.size,
        name=args.name,
        datastore=datastore,
        networks=tuple(args.nics or ()),
        access=access,
        restore_point=RestoreOpts(backup_ref=args.backup) if args.backup is not None else None,
        replica_of=args.replica_of,
        replica_count=args.replica_count,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = TroveSettings.from_env().with_overrides(
        endpoint=args.endpoint,
        token=args.token,
        project_id=args.project_id,
        timeout=args.timeout,
        verify_tls=(False if args.insecure else None),
    )

    try:
        with TroveClientApi(settings, debug=args.debug) as api:
            if args.command == "list":
                print_instances(api.instances.list())
                return 0

            if args.command == "show":
                print_instance(api.instances.get(args.id))
                return 0

            if args.command == "create":
                inst = api.instances.create(_create_opts(args))
                print(f"Created instance {inst.name or inst.id} with ID {inst.id} (status {inst.status})")
                return 0

            if args.command == "delete":
                api.instances.delete(args.id)
                print(f"Deleted instance {args.id}")
                return 0

            if args.command == "restart":
                api.instances.restart(args.id)
                print(f"Restart requested for instance {args.id}")
                return 0

            if args.command == "resize":
                if args.flavor:
                    api.instances.resize(args.id, args.flavor)
                    print(f"Resize to flavor {args.flavor} requested for instance {args.id}")
                else:
                    api.instances.resize_volume(args.id, args.size)
                    print(f"Volume resize to {args.size} GB requested for instance {args.id}")
                return 0

            if args.command == "root":
                if args.enable:
                    print_root_user(api.instances.enable_root(args.id))
                    return 0
                enabled = api.instances.root_enabled(args.id)
                print(f"Root user {'enabled' if enabled else 'not enabled'} on instance {args.id}")
                return 0

            if args.command == "configuration":
                if args.detach:
                    api.instances.detach_configuration(args.id)
                    print(f"Detached configuration group from instance {args.id}")
                else:
                    api.instances.attach_configuration(args.id, args.attach)
                    print(f"Attached configuration group {args.attach} to instance {args.id}")
                return 0

            if args.command == "detach-replica":
                api.instances.detach_replica(args.id, args.replica_of)
                print(f"Detached replica {args.id} from {args.replica_of}")
                return 0

        return 0

    except ApiError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
