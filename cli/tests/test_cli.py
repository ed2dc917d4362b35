"""
Tests for revsim commands.

Critical: the CLI must show the same walk for the same seed and always
end back where it started.
"""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from reversible.core.die import roll

runner = CliRunner()
SEED = "0x123456789ABCDEF0"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("REVSIM_SEED", "REVSIM_DIE_SIDES", "REVSIM_LOG_LEVEL", "REVSIM_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


def test_run_json_round_trip():
    result = runner.invoke(app, ["run", "--seed", SEED, "--steps", "10", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)

    assert data["seed"] == 0x123456789ABCDEF0
    assert data["restored"] is True
    assert len(data["trace"]) == 20
    assert data["trace"][9]["time_index"] == 10
    assert data["trace"][9]["past_outcomes"] == [roll(data["seed"], t) for t in range(10)]
    assert data["trace"][-1]["macrostate"] == 0
    assert data["trace"][-1]["time_index"] == 0


def test_run_same_seed_same_output():
    a = runner.invoke(app, ["run", "--seed", SEED, "--json"])
    b = runner.invoke(app, ["run", "--seed", SEED, "--json"])
    assert a.stdout == b.stdout


def test_run_seed_from_env(monkeypatch):
    monkeypatch.setenv("REVSIM_SEED", "99")
    result = runner.invoke(app, ["run", "--steps", "2", "--json"])
    assert json.loads(result.stdout)["seed"] == 99


def test_run_text_output():
    result = runner.invoke(app, ["run", "--seed", SEED, "--steps", "3"])
    assert result.exit_code == 0
    assert "returned to macrostate 0" in result.stdout


def test_run_bad_seed_exits_2():
    result = runner.invoke(app, ["run", "--seed", "nope", "--json"])
    assert result.exit_code == 2
    assert "error" in json.loads(result.stdout)


def test_run_bad_sides_exits_2():
    result = runner.invoke(app, ["run", "--seed", SEED, "--sides", "0"])
    assert result.exit_code == 2


def test_bad_env_exits_2(monkeypatch):
    monkeypatch.setenv("REVSIM_DIE_SIDES", "many")
    result = runner.invoke(app, ["run", "--json"])
    assert result.exit_code == 2


def test_memory_json():
    result = runner.invoke(app, ["memory", "--seed", SEED, "--at", "5", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)

    assert data["restored"] is True
    # trace[4] is the position after stepping over t=4, i.e. the walk at t=5
    assert data["recorded"] == data["trace"][4]["walk"]["macrostate"]
    assert data["trace"][9]["memory"]["macrostate"] == data["recorded"]
    assert data["trace"][-1]["walk"]["macrostate"] == 0
    assert data["trace"][-1]["memory"]["macrostate"] == 0


def test_memory_text():
    result = runner.invoke(app, ["memory", "--seed", SEED, "--steps", "6"])
    assert result.exit_code == 0
    assert "both states returned to 0" in result.stdout


def test_roll_json_matches_die():
    result = runner.invoke(app, ["roll", "--seed", "7", "--from=-3", "--count", "6", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["rolls"] == {str(t): roll(7, t) for t in range(-3, 3)}


def test_roll_table():
    result = runner.invoke(app, ["roll", "--seed", "7", "--count", "3"])
    assert result.exit_code == 0
    assert "Rolls for seed 0x0000000000000007" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "revsim" in result.stdout


def test_memory_seed_gives_states_independent_dice():
    result = runner.invoke(app, ["memory", "--seed", SEED, "--json"])
    trace = json.loads(result.stdout)["trace"]
    assert trace[9]["walk"]["past_outcomes"] != trace[9]["memory"]["past_outcomes"]


def test_memory_env_seed_reproducible(monkeypatch):
    monkeypatch.setenv("REVSIM_SEED", "42")
    a = runner.invoke(app, ["memory", "--json"])
    b = runner.invoke(app, ["memory", "--json"])
    assert a.stdout == b.stdout
    trace = json.loads(a.stdout)["trace"]
    assert trace[9]["walk"]["past_outcomes"] != trace[9]["memory"]["past_outcomes"]
