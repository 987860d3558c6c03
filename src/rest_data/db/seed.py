"""
rest_data.db.seed

Startup seed data.

Responsibilities:
- Split a SQL script of row inserts into individual statements.
- Execute them on a connection inside the caller's transaction.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from rest_data.errors import SeedScriptError
from rest_data.observability.logging import get_logger

log = get_logger(__name__)


def split_statements(script: str) -> list[str]:
    """
    Split on `;` outside single-quoted literals, dropping `--` line comments
    and empty statements. Doubled quotes (`''`) inside a literal are kept.
    """

    statements: list[str] = []
    buf: list[str] = []
    in_quote = False
    i = 0
    n = len(script)
    while i < n:
        ch = script[i]
        if in_quote:
            buf.append(ch)
            if ch == "'":
                if i + 1 < n and script[i + 1] == "'":
                    buf.append("'")
                    i += 1
                else:
                    in_quote = False
        elif ch == "'":
            in_quote = True
            buf.append(ch)
        elif ch == "-" and script.startswith("--", i):
            newline = script.find("\n", i)
            i = n if newline == -1 else newline
            continue
        elif ch == ";":
            statements.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1

    if in_quote:
        raise SeedScriptError("Unterminated string literal in seed script")
    statements.append("".join(buf))
    return [s.strip() for s in statements if s.strip()]


async def load_seed_script(conn: AsyncConnection, path: Path) -> int:
    if not path.is_file():
        raise SeedScriptError(f"Seed script not found: {path}")

    statements = split_statements(path.read_text(encoding="utf-8"))
    for stmt in statements:
        await conn.execute(text(stmt))
    log.info("seed_script_loaded", script=str(path), statements=len(statements))
    return len(statements)
