from .mysql import (
    MYSQL,
    MYSQLIMPORT,
    MYSQL_USER,
    mysql_available,
    mysqlimport_available,
    emp_table_sql,
    mysql_command,
    mysqlimport_command,
    create_emp_table,
    import_emp_csv,
)

__all__ = [
    "MYSQL",
    "MYSQLIMPORT",
    "MYSQL_USER",
    "mysql_available",
    "mysqlimport_available",
    "emp_table_sql",
    "mysql_command",
    "mysqlimport_command",
    "create_emp_table",
    "import_emp_csv",
]
