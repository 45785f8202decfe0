from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from tfplan_commenter.cli import app
from tfplan_commenter.config.loader import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

runner = CliRunner()


@pytest.fixture(autouse=True)
def _in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tfplan-commenter" in result.stdout

    def test_short_version_flag(self) -> None:
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "tfplan-commenter" in result.stdout


class TestCommentSinglePlan:
    def test_writes_default_output(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plan_path = write_plan(tmp_path / "plans", rc("aws_s3_bucket.x", ["create"]))

        result = runner.invoke(app, ["comment", str(plan_path)])

        assert result.exit_code == 0
        assert "Terraform plan comment generated: terraform-plan-comment.md" in result.stdout
        content = (tmp_path / "terraform-plan-comment.md").read_text(encoding="utf-8")
        assert content.startswith("## 📋 Terraform Plan Summary\n\n")
        assert "- `aws_s3_bucket.x`\n" in content

    def test_explicit_output(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plan_path = write_plan(tmp_path, rc("aws_s3_bucket.x", ["delete"]))
        out = tmp_path / "my-comment.md"

        result = runner.invoke(app, ["comment", str(plan_path), str(out)])

        assert result.exit_code == 0
        assert f"Terraform plan comment generated: {out}" in result.stdout
        assert "### 🔴 Resources to be Deleted" in out.read_text(encoding="utf-8")

    def test_stdout(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plan_path = write_plan(tmp_path, rc("aws_s3_bucket.x", ["create"]))

        result = runner.invoke(app, ["comment", str(plan_path), "--stdout"])

        assert result.exit_code == 0
        assert result.stdout.startswith("## 📋 Terraform Plan Summary")
        assert not (tmp_path / "terraform-plan-comment.md").exists()

    def test_output_from_settings(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plan_path = write_plan(tmp_path, rc("a.one", ["create"]), rc("a.two", ["create"]))
        settings = tmp_path / "settings.yaml"
        settings.write_text("output: configured.md\nmax_listed: 1\n")

        result = runner.invoke(app, ["comment", str(plan_path), "--config", str(settings)])

        assert result.exit_code == 0
        content = (tmp_path / "configured.md").read_text(encoding="utf-8")
        assert "| a.one, ... (+1 more) |" in content

    def test_missing_input(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["comment", str(tmp_path / "missing.json"), "--no-color"])
        assert result.exit_code == 1
        assert "Error reading plan file" in result.output

    def test_malformed_input(self, tmp_path: Path) -> None:
        path = tmp_path / "tfplan.json"
        path.write_text("{broken", encoding="utf-8")
        result = runner.invoke(app, ["comment", str(path), "--no-color"])
        assert result.exit_code == 1
        assert "Invalid plan file" in result.output
        assert "Traceback" not in result.output

    def test_unwritable_output(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plan_path = write_plan(tmp_path, rc("a.one", ["create"]))
        out = tmp_path / "no-such-dir" / "comment.md"
        result = runner.invoke(app, ["comment", str(plan_path), str(out), "--no-color"])
        assert result.exit_code == 1
        assert "Error writing output file" in result.output

    @patch("tfplan_commenter.config.load_settings")
    def test_config_error(self, mock_load: MagicMock, tmp_path: Path) -> None:
        mock_load.side_effect = ConfigError("bad settings")
        result = runner.invoke(app, ["comment", str(tmp_path), "--no-color"])
        assert result.exit_code == 1
        assert "Configuration error: bad settings" in result.output


class TestCommentDirectory:
    def test_multi_plan(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
    ) -> None:
        plans_dir = tmp_path / "tfplans"
        write_plan(plans_dir / "env1" / "dev", rc("aws_s3_bucket.a", ["create"]))
        write_plan(plans_dir / "env2", rc("aws_s3_bucket.b", ["delete"], before={"name": "b"}))
        write_plan(plans_dir / "env3")

        result = runner.invoke(app, ["comment", str(plans_dir)])

        assert result.exit_code == 0
        assert (
            "Multi-plan comment generated from 2 plan(s): terraform-plan-comment.md"
            in result.stdout
        )
        content = (tmp_path / "terraform-plan-comment.md").read_text(encoding="utf-8")
        assert "#### 📁 `env1/dev`" in content
        assert "#### 📁 `env2`" in content
        assert "env3" not in content

    def test_no_plans_found(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["comment", str(empty), "--no-color"])
        assert result.exit_code == 1
        assert f"No tfplan.json files found in directory: {empty}" in result.output

    def test_custom_plan_filename(
        self,
        tmp_path: Path,
        write_plan: Callable[..., Path],
        rc: Callable[..., dict[str, Any]],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("TFPLAN_PLAN_FILENAME", "plan.json")
        write_plan(tmp_path / "plans" / "prod", rc("a.one", ["create"]), filename="plan.json")

        result = runner.invoke(app, ["comment", str(tmp_path / "plans"), "--stdout"])

        assert result.exit_code == 0
        assert "#### 📁 `prod`" in result.stdout


class TestLogging:
    @patch("logging.basicConfig")
    def test_verbose_sets_info(self, mock_bc: MagicMock) -> None:
        from tfplan_commenter.cli import _configure_logging

        _configure_logging(1)
        mock_bc.assert_called_once_with(
            level=logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )
        assert logging.getLogger("tfplan_commenter").level == logging.INFO

    @patch("logging.basicConfig")
    def test_double_verbose_sets_debug(self, mock_bc: MagicMock) -> None:
        from tfplan_commenter.cli import _configure_logging

        _configure_logging(2)
        mock_bc.assert_called_once()
        assert logging.getLogger("tfplan_commenter").level == logging.DEBUG

    @patch("logging.basicConfig")
    def test_no_verbose_stays_unconfigured(self, mock_bc: MagicMock) -> None:
        from tfplan_commenter.cli import _configure_logging

        _configure_logging(0)
        mock_bc.assert_not_called()

    @patch("logging.basicConfig")
    def test_tfplan_log_env_var(self, mock_bc: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        from tfplan_commenter.cli import _configure_logging

        monkeypatch.setenv("TFPLAN_LOG", "DEBUG")
        _configure_logging(0)
        mock_bc.assert_called_once()
        assert logging.getLogger("tfplan_commenter").level == logging.DEBUG

    @patch("logging.basicConfig")
    def test_invalid_tfplan_log_warns_and_defaults_to_info(
        self,
        mock_bc: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from tfplan_commenter.cli import _configure_logging

        monkeypatch.setenv("TFPLAN_LOG", "BOGUS")
        _configure_logging(0)
        mock_bc.assert_called_once()
        assert logging.getLogger("tfplan_commenter").level == logging.INFO
        assert "invalid TFPLAN_LOG level" in capsys.readouterr().err

    @patch("logging.basicConfig")
    def test_extra_verbosity_caps_at_debug(self, mock_bc: MagicMock) -> None:
        from tfplan_commenter.cli import _configure_logging

        _configure_logging(5)
        mock_bc.assert_called_once()
        assert logging.getLogger("tfplan_commenter").level == logging.DEBUG

    @patch("logging.basicConfig")
    def test_tfplan_log_overrides_verbose_flag(
        self, mock_bc: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from tfplan_commenter.cli import _configure_logging

        monkeypatch.setenv("TFPLAN_LOG", "warning")
        _configure_logging(2)
        mock_bc.assert_called_once()
        assert logging.getLogger("tfplan_commenter").level == logging.WARNING


class TestHelp:
    def test_app_help_describes_comment_workflow(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Markdown" in result.stdout
        assert "comment" in result.stdout


class TestUseColor:
    def test_default_is_colored(self) -> None:
        from tfplan_commenter.cli.commands import _use_color

        assert _use_color(no_color=False)

    def test_flag_disables_color(self) -> None:
        from tfplan_commenter.cli.commands import _use_color

        assert not _use_color(no_color=True)

    def test_no_color_env_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from tfplan_commenter.cli.commands import _use_color

        monkeypatch.setenv("NO_COLOR", "1")
        assert not _use_color(no_color=False)
