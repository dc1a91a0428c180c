from .studyjoin import (
    check_identifier,
    table_statements,
    join_query,
    studyjoin_statements,
    write_studyjoin_script,
)

__all__ = [
    "check_identifier",
    "table_statements",
    "join_query",
    "studyjoin_statements",
    "write_studyjoin_script",
]
