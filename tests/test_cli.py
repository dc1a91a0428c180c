"""Tests for the orgtree command-line entry points."""
import shlex

import pytest

from orgtree.cli import emp_import, nary_tree, org_chart, studyjoin
from orgtree.external.mysql import MYSQL, MYSQLIMPORT


# --- org chart ---

def test_org_chart_stdout(capsys):
    assert org_chart.main(["2", "3", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "An Employee Database"
    assert lines[1] == "id, emp_id, emp_name, mgr_id"
    rows = [line.split(", ") for line in lines[2:]]
    assert len(rows) == 4
    assert [r[0] for r in rows] == ["1", "2", "3", "4"]
    assert [r[3] for r in rows] == ["NULL", "1", "1", "2"]


def test_org_chart_seed_is_reproducible(capsys):
    org_chart.main(["3", "5", "--seed", "7"])
    first = capsys.readouterr().out
    org_chart.main(["3", "5", "--seed", "7"])
    assert capsys.readouterr().out == first


def test_org_chart_output_file(tmp_path, capsys):
    path = tmp_path / "emp.csv"
    assert org_chart.main(["10", "25", "-o", str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "26" in captured.err
    assert len(path.read_text().splitlines()) == 2 + 26


def test_org_chart_missing_argument(capsys):
    with pytest.raises(SystemExit) as exc:
        org_chart.main(["2"])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage" in captured.err


def test_org_chart_non_numeric(capsys):
    with pytest.raises(SystemExit) as exc:
        org_chart.main(["two", "3"])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_org_chart_non_positive(capsys):
    assert org_chart.main(["0", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "n_children" in captured.err


# --- tree printer ---

def test_nary_tree(capsys):
    assert nary_tree.main(["2", "3"]) == 0
    assert capsys.readouterr().out == "n: 2, n_nodes: 3\n1, 2\n1, 3\n2, 4\n"


def test_nary_tree_levels(capsys):
    assert nary_tree.main(["3", "4", "--levels"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["0: 1, 2", "0: 1, 3", "0: 1, 4", "1: 2, 5"]


def test_nary_tree_zero_edges(capsys):
    assert nary_tree.main(["2", "0"]) == 0
    assert capsys.readouterr().out == "n: 2, n_nodes: 0\n"


def test_nary_tree_bad_branching(capsys):
    assert nary_tree.main(["0", "5"]) == 1
    assert capsys.readouterr().out == ""


# --- studyjoin ---

def test_studyjoin(tmp_path, capsys):
    path = tmp_path / "tmp.sql"
    assert studyjoin.main(["--rows", "2", "--tables", "2", "-o", str(path), "--with-query"]) == 0
    lines = path.read_text().splitlines()
    assert len(lines) == 3 + 2 * 3 + 1
    assert lines[-1] == "select count(*) from t1 join t2 on i1 = i2;"
    assert "10" in capsys.readouterr().err


def test_studyjoin_bad_db_name(tmp_path, capsys):
    path = tmp_path / "tmp.sql"
    assert studyjoin.main(["--db", "bad name", "-o", str(path)]) == 1
    assert not path.exists()


# --- emp import ---

def test_emp_import_dry_run(capsys):
    assert emp_import.main(["emp.csv", "--dry-run", "--user", "root"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    first = shlex.split(lines[0])
    assert first[:3] == [MYSQL, "-uroot", "-e"]
    assert first[3] == "create database if not exists studyjoin"
    last = shlex.split(lines[2])
    assert last[0] == MYSQLIMPORT
    assert last[-2:] == ["studyjoin", "emp.csv"]


def test_emp_import_bad_table_name(capsys):
    assert emp_import.main(["my-emp.csv", "--dry-run"]) == 1
    assert capsys.readouterr().out == ""
