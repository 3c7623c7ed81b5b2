# scripts/schema_cli.py
"""
Command line access to a running Schema Studio API.

Usage:
    python3 scripts/schema_cli.py databases
    python3 scripts/schema_cli.py create-database Sales --type postgresql
    python3 scripts/schema_cli.py tables 1
    python3 scripts/schema_cli.py insert-rows 3 '[{"id": 1}]'
    python3 scripts/schema_cli.py rows 3 --limit 10
"""
import sys
import os
import argparse
import json

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from client.schema_client import SchemaStudioClient, SchemaStudioAPIError
from core.config import SCHEMA_STUDIO_URL
from models.database import DatabaseType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Schema Studio command line client")
    parser.add_argument("--url", default=SCHEMA_STUDIO_URL, help="API base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("databases", help="list databases")

    create = sub.add_parser("create-database", help="create a database")
    create.add_argument("name")
    create.add_argument("--type", dest="database_type", default=DatabaseType.postgresql.value,
                        choices=[t.value for t in DatabaseType])
    create.add_argument("--description")

    delete = sub.add_parser("delete-database", help="delete a database and everything in it")
    delete.add_argument("database_id", type=int)

    tables = sub.add_parser("tables", help="list tables of a database")
    tables.add_argument("database_id", type=int)

    insert = sub.add_parser("insert-rows", help="store rows given as a JSON array")
    insert.add_argument("table_id", type=int)
    insert.add_argument("rows", help='e.g. \'[{"id": 1}]\'')

    rows = sub.add_parser("rows", help="show stored rows of a table")
    rows.add_argument("table_id", type=int)
    rows.add_argument("--limit", type=int, default=100)
    rows.add_argument("--offset", type=int, default=0)

    return parser


def run(args: argparse.Namespace, client: SchemaStudioClient) -> int:
    if args.command == "databases":
        for database in client.list_databases():
            print(f"{database.id}\t{database.name}\t{database.database_type.value}\t{len(database.tables)} tables")

    elif args.command == "create-database":
        database = client.create_database(args.name, args.database_type, args.description)
        print(f"✅ Database '{database.name}' created with ID {database.id}")

    elif args.command == "delete-database":
        client.delete_database(args.database_id)
        print(f"🗑️ Database {args.database_id} deleted")

    elif args.command == "tables":
        for table in client.list_tables(args.database_id):
            columns = ", ".join(f"{a.name} {a.data_type}" for a in table.attributes)
            print(f"{table.id}\t{table.name}\t({columns})")

    elif args.command == "insert-rows":
        try:
            rows = json.loads(args.rows)
        except json.JSONDecodeError as e:
            print(f"❌ Invalid JSON: {e}", file=sys.stderr)
            return 2
        stored = client.insert_table_data(args.table_id, rows)
        print(f"✅ {len(stored)} records stored")

    elif args.command == "rows":
        page = client.get_table_data(args.table_id, limit=args.limit, offset=args.offset)
        for row in page.rows:
            print(f"{row.id}\t{json.dumps(row.row_data, default=str)}")
        print(f"-- {len(page.rows)} of {page.total}")

    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    with SchemaStudioClient(base_url=args.url) as client:
        try:
            return run(args, client)
        except SchemaStudioAPIError as e:
            print(f"❌ {e.message}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
