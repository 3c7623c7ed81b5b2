"""Render a logical database as a CREATE TABLE script in its own dialect."""

from typing import List

from models.database import Database, DatabaseType

RESERVED_WORDS = {
    "TABLE", "SELECT", "INSERT", "UPDATE", "DELETE", "WHERE", "FROM", "CREATE",
    "ALTER", "DROP", "INDEX", "KEY", "PRIMARY", "FOREIGN", "ORDER", "GROUP", "USER",
}

DEFAULT_DATA_TYPE = "TEXT"


def sanitize_identifier(name: str) -> str:
    sanitized = "".join(c if c.isalnum() or c == "_" else "_" for c in name.strip().replace(" ", "_"))
    if not sanitized or not (sanitized[0].isalpha() or sanitized[0] == "_"):
        sanitized = f"t_{sanitized}"
    return sanitized


def quote_identifier(name: str, dialect: DatabaseType) -> str:
    ident = sanitize_identifier(name)
    if dialect == DatabaseType.mysql:
        return f"`{ident}`"
    if dialect == DatabaseType.mssql:
        return f"[{ident}]"
    if ident.upper() in RESERVED_WORDS or ident != ident.lower():
        return f'"{ident}"'
    return ident


def render_table(table, dialect: DatabaseType) -> str:
    lines: List[str] = []
    primary_keys = []
    for attr in table.attributes:
        column = quote_identifier(attr.name, dialect)
        data_type = (attr.data_type or "").strip() or DEFAULT_DATA_TYPE
        line = f"    {column} {data_type}"
        if not attr.is_nullable or attr.is_primary_key:
            line += " NOT NULL"
        lines.append(line)
        if attr.is_primary_key:
            primary_keys.append(column)

    if primary_keys:
        lines.append(f"    PRIMARY KEY ({', '.join(primary_keys)})")
    if not lines:
        return f"-- {table.name}: no columns defined"

    header = f"CREATE TABLE {quote_identifier(table.name, dialect)} ("
    if table.description:
        header = f"-- {table.description}\n{header}"
    return header + "\n" + ",\n".join(lines) + "\n);"


def render_database_sql(database: Database) -> str:
    dialect = DatabaseType(database.database_type)
    statements = [f"-- {database.name} ({dialect.value})"]
    for table in sorted(database.tables, key=lambda t: t.id):
        statements.append(render_table(table, dialect))
    return "\n\n".join(statements) + "\n"
