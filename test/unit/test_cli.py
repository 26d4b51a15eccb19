from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import build_parser, main
from test.fixtures import write_config


@pytest.fixture()
def db(tmp_path: Path) -> str:
    return str(tmp_path / "cli.db")


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, list[str]]:
    code = main(list(argv))
    return code, capsys.readouterr().out.splitlines()


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_record_lifecycle_through_cli(capsys: pytest.CaptureFixture[str], db: str) -> None:
    assert _run(capsys, "--db-path", db, "create", "--id", "1", "people", "name=Alice") == (0, ["1"])

    code, out = _run(capsys, "--db-path", db, "read", "people", "1")
    assert code == 0
    assert json.loads(out[0]) == {"id": 1, "name": "Alice"}

    assert _run(capsys, "--db-path", db, "update", "people", "1", "name=Alicia", "age=30")[0] == 0
    _, out = _run(capsys, "--db-path", db, "read", "people", "1")
    assert json.loads(out[0]) == {"id": 1, "name": "Alicia", "age": 30}

    assert _run(capsys, "--db-path", db, "delete", "people", "1") == (0, ["deleted 1"])
    code, out = _run(capsys, "--db-path", db, "read", "people", "1")
    assert code == 1
    assert out[0].startswith("error: No record with id 1")

    assert _run(capsys, "--db-path", db, "list", "people") == (0, [])


def test_create_assigns_ids_and_list_keeps_order(capsys: pytest.CaptureFixture[str], db: str) -> None:
    assert _run(capsys, "--db-path", db, "create", "people", "name=Alice") == (0, ["1"])
    assert _run(capsys, "--db-path", db, "create", "people", "name=Bob") == (0, ["2"])
    code, out = _run(capsys, "--db-path", db, "list", "people")
    assert code == 0
    assert [json.loads(line)["name"] for line in out] == ["Alice", "Bob"]


def test_duplicate_create_fails_unless_overwrite_allowed(
    capsys: pytest.CaptureFixture[str], db: str,
) -> None:
    _run(capsys, "--db-path", db, "create", "--id", "u1", "people", "name=Alice")
    code, out = _run(capsys, "--db-path", db, "create", "--id", "u1", "people", "name=Eve")
    assert code == 1
    assert "already exists" in out[0]

    code, _ = _run(
        capsys, "--db-path", db, "--allow-overwrite", "create", "--id", "u1", "people", "name=Eve",
    )
    assert code == 0
    _, out = _run(capsys, "--db-path", db, "read", "people", "u1")
    assert json.loads(out[0])["name"] == "Eve"


def test_malformed_field_is_reported(capsys: pytest.CaptureFixture[str], db: str) -> None:
    code, out = _run(capsys, "--db-path", db, "create", "people", "oops")
    assert code == 1
    assert "FIELD=VALUE" in out[0]


def test_unopenable_db_path_is_reported(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    db = str(tmp_path / "missing" / "cli.db")
    code, out = _run(capsys, "--db-path", db, "list", "people")
    assert code == 1
    assert out[0].startswith("error: ")


def test_all_digit_id_is_stored_as_integer(capsys: pytest.CaptureFixture[str], db: str) -> None:
    assert _run(capsys, "--db-path", db, "create", "--id", "007", "people", "name=Bond") == (0, ["7"])
    _, out = _run(capsys, "--db-path", db, "read", "people", "7")
    assert json.loads(out[0]) == {"id": 7, "name": "Bond"}


def test_invalid_config_dir_fails(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    write_config(tmp_path, backend="postgres")
    code, out = _run(capsys, "--config-dir", str(tmp_path), "list", "people")
    assert code == 1
    assert out[0] == "Config validation failed:"


def test_config_dir_supplies_db_path(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    db = str(tmp_path / "from_config.db")
    write_config(tmp_path, backend="sqlite", db_path=db)
    assert _run(capsys, "--config-dir", str(tmp_path), "create", "people", "name=Alice")[0] == 0
    assert Path(db).is_file()


def test_users_products_and_orders(capsys: pytest.CaptureFixture[str], db: str) -> None:
    code, out = _run(
        capsys, "--db-path", db, "register-user",
        "--first-name", "Ada", "--last-name", "Lovelace", "--email", "ada@example.com",
    )
    assert code == 0
    assert out == ["registered 1 | Ada Lovelace | ada@example.com"]
    assert _run(capsys, "--db-path", db, "list-users") == (0, ["1 | Ada Lovelace | ada@example.com"])

    assert _run(capsys, "--db-path", db, "add-product", "Desk", "199") == (0, ["added 1 | Desk | 199.00"])
    assert _run(capsys, "--db-path", db, "list-products") == (0, ["1 | Desk | 199.00"])

    code, out = _run(
        capsys, "--db-path", db, "place-order", "--items", "Desk, Lamp", "--amount", "230", "--currency", "EUR",
    )
    assert code == 0
    assert out == ["placed 1 | 230.00 EUR | Desk, Lamp"]
    assert _run(capsys, "--db-path", db, "list-orders") == (0, ["1 | 230.00 EUR | Desk, Lamp"])
