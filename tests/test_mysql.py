"""Tests for orgtree.external.mysql."""
import pytest

from orgtree.errors import InvalidArgument
from orgtree.external import mysql
from orgtree.external.mysql import (
    MYSQL,
    MYSQLIMPORT,
    emp_table_sql,
    mysql_command,
    mysqlimport_command,
)


# --- command construction (always works) ---

def test_emp_table_sql():
    stmts = emp_table_sql()
    assert stmts[0] == "create database if not exists studyjoin"
    assert "drop table if exists emp;" in stmts[1]
    assert "create table emp(id int, emp_id int, emp_name varchar(30), mgr_id int);" in stmts[1]


def test_emp_table_sql_rejects_bad_names():
    with pytest.raises(InvalidArgument):
        emp_table_sql("studyjoin; drop database x")


def test_mysql_command():
    assert mysql_command("select 1", user="bob") == [MYSQL, "-ubob", "-e", "select 1"]


def test_mysqlimport_command():
    cmd = mysqlimport_command("out/emp.csv", "studyjoin", user="root")
    assert cmd[0] == MYSQLIMPORT
    assert "-uroot" in cmd
    assert "--ignore-lines=2" in cmd
    assert "--fields-terminated-by=, " in cmd
    assert "--columns=id,emp_id,emp_name,mgr_id" in cmd
    assert "--local" in cmd
    assert cmd[-2:] == ["studyjoin", "out/emp.csv"]
    assert "-p" not in cmd


def test_mysqlimport_command_password_prompt():
    assert "-p" in mysqlimport_command("emp.csv", prompt_password=True)


def test_mysqlimport_rejects_bad_table_name():
    with pytest.raises(InvalidArgument):
        mysqlimport_command("my-emp.csv")


# --- execution ---

def test_create_emp_table_runs_each_statement(monkeypatch):
    calls = []
    monkeypatch.setattr(mysql, "mysql_available", lambda: True)
    monkeypatch.setattr(mysql, "_run", calls.append)
    mysql.create_emp_table("sj", "emp", user="u")
    assert calls == [mysql_command(sql, user="u") for sql in emp_table_sql("sj", "emp")]


def test_import_requires_client(monkeypatch):
    monkeypatch.setattr(mysql, "mysqlimport_available", lambda: False)
    with pytest.raises(RuntimeError):
        mysql.import_emp_csv("emp.csv")
