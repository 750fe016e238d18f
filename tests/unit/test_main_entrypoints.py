from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from fibtree import main as main_mod
from fibtree.features import OperationResult

runner = CliRunner()


@pytest.mark.unit
def test_feature_or_exit_unknown():
    with pytest.raises(typer.Exit):
        main_mod._feature_or_exit("does-not-exist")


@pytest.mark.unit
def test_handle_cli_result_failure_raises_exit():
    with pytest.raises(typer.Exit):
        main_mod._handle_cli_result("compute", OperationResult.fail("boom"))


@pytest.mark.unit
def test_compute_command(clean_env):
    result = runner.invoke(main_mod.app, ["compute", "10", "--cores", "4"])
    assert result.exit_code == 0, result.output
    assert "Fib(10) => 55" in result.output
    assert "Fib(10) has 2 digits" in result.output
    assert "Took " in result.output


@pytest.mark.unit
def test_compute_command_quiet_with_dask(clean_env):
    result = runner.invoke(
        main_mod.app,
        ["compute", "50", "--cores", "4", "--strategy", "dask", "--quiet"],
    )
    assert result.exit_code == 0, result.output
    assert "Fib(50) =>" not in result.output
    assert "Fib(50) has 11 digits" in result.output


@pytest.mark.unit
def test_compute_command_rejects_unknown_strategy(clean_env):
    result = runner.invoke(main_mod.app, ["compute", "10", "--strategy", "bogus"])
    assert result.exit_code == 1


@pytest.mark.unit
def test_tree_command_saves_dot(clean_env, tmp_path: Path):
    dot_path = tmp_path / "tree.dot"
    result = runner.invoke(
        main_mod.app,
        ["tree", "10", "--cores", "4", "--save-tree-as-dot", str(dot_path)],
    )
    assert result.exit_code == 0, result.output
    assert "tree_size=4 depth=2" in result.output
    assert "fib(6)" in result.output
    assert dot_path.exists()


@pytest.mark.unit
def test_version_command():
    result = runner.invoke(main_mod.app, ["version"])
    assert result.exit_code == 0
