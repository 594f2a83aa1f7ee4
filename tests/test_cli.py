"""Tests for the command-line interface."""

import json

from fba_planner.cli import main
from fba_planner.metrics.defaults import INITIAL_PRODUCTS


def test_calculate_example(capsys):
    assert main(["calculate"]) == 0

    out = capsys.readouterr().out
    assert "Using example product" in out
    assert "Penguin 20CM" in out
    assert "Landed COGS:     ₹229.00" in out
    assert "Net Profit / Unit: ₹60.19" in out


def test_calculate_from_json(capsys):
    data = INITIAL_PRODUCTS[1].model_dump()
    assert main(["calculate", "--json", json.dumps(data)]) == 0

    out = capsys.readouterr().out
    assert "Elephant 20CM" in out
    assert "Referral Fee:    ₹0.00" in out


def test_calculate_invalid_json(capsys):
    assert main(["calculate", "--json", '{"sku": "incomplete"}']) == 2

    err = capsys.readouterr().err
    assert "Invalid product JSON" in err


def test_portfolio_default_catalog(capsys):
    assert main(["portfolio"]) == 0

    out = capsys.readouterr().out
    assert "Portfolio (2 products)" in out
    assert "Total Investment: ₹506,250" in out
    assert "Investment Recovery: 24.8 months" in out


def test_portfolio_from_file(tmp_path, capsys):
    loss_maker = INITIAL_PRODUCTS[0].model_copy(update={"selling_price_inr": 150})
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([loss_maker.model_dump()]))

    assert main(["portfolio", "--file", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Portfolio (1 products)" in out
    assert "Investment Recovery: N/A" in out


def test_portfolio_missing_file(tmp_path, capsys):
    assert main(["portfolio", "--file", str(tmp_path / "nope.json")]) == 2
    assert "Cannot read" in capsys.readouterr().err


def test_example_round_trips(capsys):
    assert main(["example"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["sku"] == "Penguin 20CM"
    assert data["selling_price_inr"] == 659


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: fba-planner" in capsys.readouterr().out
