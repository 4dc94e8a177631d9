from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, List, Optional, TextIO

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class PlanLoaderError(RuntimeError):
    """Exception raised when terraform plan ingestion fails."""


class PlanLoader:
    """Load Terraform plan JSON from an exported artifact, stdin or a binary plan file."""

    def __init__(
        self,
        working_dir: str | os.PathLike[str] = ".",
        *,
        plan_json_path: str | os.PathLike[str] | None = None,
        plan_file_path: str | os.PathLike[str] | None = None,
        terraform_bin: str = "terraform",
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.working_dir = Path(working_dir).resolve()
        self.read_stdin = plan_json_path is not None and str(plan_json_path) == STDIN_PATH
        self.plan_json_path = (
            Path(plan_json_path).resolve() if plan_json_path and not self.read_stdin else None
        )
        self.plan_file_path = Path(plan_file_path).resolve() if plan_file_path else None
        self.terraform_bin = terraform_bin
        self.stdin = stdin

    def load_plan(self) -> Any:
        """Load plan data from an artifact, stdin or by running ``terraform show``."""

        if self.plan_file_path:
            return self._load_plan_file(self.plan_file_path)

        if self.read_stdin:
            return self._load_stdin()

        if self.plan_json_path:
            return self._load_json_artifact(self.plan_json_path)

        raise PlanLoaderError("No plan JSON or plan file was supplied")

    # Artifact ingestion helpers -------------------------------------------------
    def _load_json_artifact(self, path: Path) -> Any:
        if not path.exists():
            raise PlanLoaderError(f"Terraform plan JSON artifact not found: {path}")

        logger.debug("Reading plan JSON from %s", path)
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise PlanLoaderError(f"Invalid JSON in plan artifact: {path}") from exc

    def _load_stdin(self) -> Any:
        stream = self.stdin if self.stdin is not None else sys.stdin
        logger.debug("Reading plan JSON from stdin")
        try:
            return json.load(stream)
        except json.JSONDecodeError as exc:
            raise PlanLoaderError("Invalid JSON read from stdin") from exc

    def _load_plan_file(self, path: Path) -> Any:
        if not path.exists():
            raise PlanLoaderError(f"Terraform plan file not found: {path}")

        completed = self._run_command(
            [self.terraform_bin, "show", "-json", str(path)],
            cwd=self.working_dir,
            capture_output=True,
        )
        return self._parse_command_output(completed.stdout)

    def _parse_command_output(self, output: str) -> Any:
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            raise PlanLoaderError("Command output was not valid JSON") from exc

    # Command runner -------------------------------------------------------------
    def _run_command(
        self,
        args: List[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess[str]:
        logger.debug("Running %s", " ".join(args))
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                check=True,
                capture_output=capture_output,
                text=True,
            )
        except FileNotFoundError as exc:
            raise PlanLoaderError(f"Executable not found: {args[0]}") from exc
        except subprocess.CalledProcessError as exc:
            raise PlanLoaderError(
                f"Command '{' '.join(args)}' failed with exit code {exc.returncode}"
            ) from exc

        return completed


__all__ = ["PlanLoader", "PlanLoaderError", "STDIN_PATH"]
