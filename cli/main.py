from __future__ import annotations

import argparse
import json
import sqlite3
from dataclasses import replace
from typing import Sequence

from app import ApplicationFacade
from domain.errors import EntityStoreError
from domain.models import Record, StoreConfig
from domain.ports import EntityStorePort
from domain.services import OrderService, ProductService, UserService
from domain.utils import parse_assignments, parse_identifier, split_csv
from infra.config import FileSystemConfigProvider
from infra.persistence import SQLiteEntityStore
from infra.runtime import LoggingOrderFulfilment, StructuredLogger
from infra.store_factory import build_entity_store

_RECORD_COMMANDS = {"create", "read", "update", "delete", "list"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="entity-store")
    parser.add_argument("--config-dir", default=None, help="Folder holding config.json")
    parser.add_argument("--db-path", default=None, help="SQLite file (overrides config)")
    parser.add_argument("--backend", choices=["memory", "sqlite"], default=None)
    parser.add_argument(
        "--allow-overwrite",
        action="store_true",
        default=None,
        help="Let create replace a record whose id already exists",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create_p = sub.add_parser("create", help="Insert a record and print its id")
    create_p.add_argument("collection")
    create_p.add_argument(
        "--id",
        dest="record_id",
        default=None,
        help="Record id; all-digit ids are stored as integers, so 007 becomes 7",
    )
    create_p.add_argument("fields", nargs="*", metavar="FIELD=VALUE")

    read_p = sub.add_parser("read", help="Print one record as JSON")
    read_p.add_argument("collection")
    read_p.add_argument("record_id")

    update_p = sub.add_parser("update", help="Merge fields into an existing record")
    update_p.add_argument("collection")
    update_p.add_argument("record_id")
    update_p.add_argument("fields", nargs="+", metavar="FIELD=VALUE")

    delete_p = sub.add_parser("delete")
    delete_p.add_argument("collection")
    delete_p.add_argument("record_id")

    list_p = sub.add_parser("list", help="Print every record, one JSON object per line")
    list_p.add_argument("collection")

    register_p = sub.add_parser("register-user")
    register_p.add_argument("--first-name", required=True)
    register_p.add_argument("--last-name", required=True)
    register_p.add_argument("--email", required=True)

    sub.add_parser("list-users")

    product_p = sub.add_parser("add-product")
    product_p.add_argument("name")
    product_p.add_argument("price", type=float)

    sub.add_parser("list-products")

    order_p = sub.add_parser("place-order")
    order_p.add_argument("--items", required=True, help="Comma-separated product names")
    order_p.add_argument("--amount", type=float, required=True)
    order_p.add_argument("--currency", default="USD")

    sub.add_parser("list-orders")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = _resolve_config(args)
    if config is None:
        return 1

    logger = StructuredLogger()
    stores: list[EntityStorePort] = []

    def _open(collection: str) -> EntityStorePort:
        store = build_entity_store(config, collection)
        stores.append(store)
        return store

    try:
        if args.command in _RECORD_COMMANDS:
            return _handle_record_command(args, _open(args.collection))

        facade = ApplicationFacade(
            user_service=UserService(store=_open("users"), logger=logger),
            product_service=ProductService(store=_open("products"), logger=logger),
            order_service=OrderService(
                store=_open("orders"),
                fulfilment=LoggingOrderFulfilment(logger),
                logger=logger,
            ),
        )
        return _handle_facade_command(args, facade)
    except (EntityStoreError, ValueError, sqlite3.Error) as exc:
        print(f"error: {exc}")
        return 1
    finally:
        for store in stores:
            if isinstance(store, SQLiteEntityStore):
                store.close()


def _resolve_config(args: argparse.Namespace) -> StoreConfig | None:
    config = StoreConfig()
    if args.config_dir is not None:
        provider = FileSystemConfigProvider(args.config_dir)
        errors = provider.validate()
        if errors:
            print("Config validation failed:")
            for err in errors:
                print(f"  - {err}")
            return None
        config = provider.get_config()

    if args.db_path is not None:
        config = replace(config, db_path=args.db_path)
    if args.backend is not None:
        config = replace(config, backend=args.backend)
    if args.allow_overwrite:
        config = replace(config, allow_overwrite=True)
    return config


def _handle_record_command(args: argparse.Namespace, store: EntityStorePort) -> int:
    if args.command == "create":
        record_id = parse_identifier(args.record_id) if args.record_id is not None else None
        created = store.create(Record(id=record_id, fields=parse_assignments(args.fields)))
        print(created)
        return 0

    if args.command == "read":
        record = store.read(parse_identifier(args.record_id))
        print(json.dumps(record.to_dict()))
        return 0

    if args.command == "update":
        existing = store.read(parse_identifier(args.record_id))
        store.update(existing.with_fields(**parse_assignments(args.fields)))
        print(f"updated {existing.id}")
        return 0

    if args.command == "delete":
        record_id = parse_identifier(args.record_id)
        store.delete(record_id)
        print(f"deleted {record_id}")
        return 0

    for record in store.find_all():
        print(json.dumps(record.to_dict()))
    return 0


def _handle_facade_command(args: argparse.Namespace, facade: ApplicationFacade) -> int:
    if args.command == "register-user":
        user = facade.register_user(args.first_name, args.last_name, args.email)
        print(f"registered {user.id} | {user.display_name} | {user.email}")
        return 0

    if args.command == "list-users":
        for user in facade.list_users():
            print(f"{user.id} | {user.display_name} | {user.email}")
        return 0

    if args.command == "add-product":
        product = facade.add_product(args.name, args.price)
        print(f"added {product.id} | {product.name} | {product.price:.2f}")
        return 0

    if args.command == "list-products":
        for product in facade.list_products():
            print(f"{product.id} | {product.name} | {product.price:.2f}")
        return 0

    if args.command == "place-order":
        order = facade.place_order(split_csv(args.items), args.amount, args.currency)
        print(f"placed {order.id} | {order.total} | {', '.join(order.items)}")
        return 0

    if args.command == "list-orders":
        for order in facade.list_orders():
            print(f"{order.id} | {order.total} | {', '.join(order.items)}")
        return 0

    raise SystemExit(f"Unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
