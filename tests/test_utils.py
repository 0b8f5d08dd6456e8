"""Unit tests for utility functions (create_ts_package.utils).

Tests cover:
- run_command (success, failure, cwd, timeout, env, capture=False, missing binary)
- write_text_file
- Rich output helpers (print_success, print_warning, print_summary_table)
- StepSpinner (step success/failure, paused, stop)
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from create_ts_package.utils import (
    StepSpinner,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
    write_text_file,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command([sys.executable, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_command(self):
        returncode, _, _ = await run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cwd_of_parent_unchanged(self, tmp_path: Path):
        before = Path.cwd()
        await run_command([sys.executable, "-c", "pass"], cwd=tmp_path)
        assert Path.cwd() == before

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_timeout(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_env(self):
        returncode, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.environ['TS_TEST_VAR'])"],
            env={"TS_TEST_VAR": "value"},
        )
        assert returncode == 0
        assert stdout == "value"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_capture_false_returns_empty_strings(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "pass"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_binary_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["nonexistent-binary-12345-xyz"])


# ---------------------------------------------------------------------------
# write_text_file
# ---------------------------------------------------------------------------


class TestWriteTextFile:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_writes_utf8(self, tmp_path: Path):
        target = tmp_path / "out.txt"
        result = await write_text_file(target, "héllo ✨\n")
        assert result == target
        assert target.read_bytes() == "héllo ✨\n".encode("utf-8")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_overwrites(self, tmp_path: Path):
        target = tmp_path / "out.txt"
        target.write_text("old")
        await write_text_file(str(target), "new")
        assert target.read_text() == "new"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            await write_text_file(tmp_path / "missing" / "out.txt", "x")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("All good")
        assert "All good" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_warning(self, capsys):
        print_warning("Careful")
        assert "Careful" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Package": "foo", "typescript": "^5.0.0"}, title="Project")
        out = capsys.readouterr().out
        assert "Project" in out
        assert "foo" in out
        assert "^5.0.0" in out


# ---------------------------------------------------------------------------
# StepSpinner
# ---------------------------------------------------------------------------


class TestStepSpinner:
    @pytest.mark.unit
    def test_step_success_prints_tick(self, quiet_spinner: StepSpinner, spinner_output: io.StringIO):
        with quiet_spinner.step("Copying template..."):
            assert quiet_spinner.is_spinning
        assert not quiet_spinner.is_spinning
        assert "✔ Copying template..." in spinner_output.getvalue()

    @pytest.mark.unit
    def test_step_failure_prints_error_and_reraises(
        self, quiet_spinner: StepSpinner, spinner_output: io.StringIO
    ):
        with pytest.raises(RuntimeError, match="disk full"):
            with quiet_spinner.step("Writing files..."):
                raise RuntimeError("disk full")
        assert not quiet_spinner.is_spinning
        out = spinner_output.getvalue()
        assert "✖ disk full" in out
        assert "✔" not in out

    @pytest.mark.unit
    def test_step_failure_without_message_uses_step_text(
        self, quiet_spinner: StepSpinner, spinner_output: io.StringIO
    ):
        with pytest.raises(RuntimeError):
            with quiet_spinner.step("Installing..."):
                raise RuntimeError()
        assert "✖ Installing..." in spinner_output.getvalue()

    @pytest.mark.unit
    def test_paused_restores_spinner(self, quiet_spinner: StepSpinner):
        quiet_spinner.start("Working")
        with quiet_spinner.paused():
            assert not quiet_spinner.is_spinning
        assert quiet_spinner.is_spinning
        assert quiet_spinner.text == "Working"
        quiet_spinner.stop()

    @pytest.mark.unit
    def test_paused_when_idle_stays_idle(self, quiet_spinner: StepSpinner):
        with quiet_spinner.paused():
            pass
        assert not quiet_spinner.is_spinning

    @pytest.mark.unit
    def test_start_twice_updates_text(self, quiet_spinner: StepSpinner):
        quiet_spinner.start("one")
        quiet_spinner.start("two")
        assert quiet_spinner.text == "two"
        quiet_spinner.stop()
        quiet_spinner.stop()
        assert not quiet_spinner.is_spinning

    @pytest.mark.unit
    def test_markup_in_text_is_escaped(self, quiet_spinner: StepSpinner, spinner_output: io.StringIO):
        quiet_spinner.succeed("Wrote [bold]x[/bold]")
        assert "Wrote [bold]x[/bold]" in spinner_output.getvalue()
