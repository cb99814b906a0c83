"""GitHub Actions workflow context.

Reads the default environment of a workflow run and writes step outputs
in the format the runner expects.
"""

import logging
import os
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TAG_REF_PREFIX = "refs/tags/"


@dataclass(frozen=True)
class GitHubContext:
    """Subset of the workflow environment used for defaults.

    Attributes:
        repository: Repository running the workflow ("owner/repo"), if any
        ref: Full git ref that triggered the run (e.g. "refs/tags/v1.0.0")
        output_path: File that receives step outputs (GITHUB_OUTPUT)
        actions: True when running inside GitHub Actions
        debug: True when runner debug logging is enabled
    """

    repository: str | None = None
    ref: str | None = None
    output_path: Path | None = None
    actions: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GitHubContext":
        """Build context from environment variables."""
        environ = os.environ if environ is None else environ
        output_path = environ.get("GITHUB_OUTPUT")
        return cls(
            repository=environ.get("GITHUB_REPOSITORY") or None,
            ref=environ.get("GITHUB_REF") or None,
            output_path=Path(output_path) if output_path else None,
            actions=environ.get("GITHUB_ACTIONS") == "true",
            debug=environ.get("RUNNER_DEBUG") == "1",
        )

    def is_workflow_repository(self, repository: str) -> bool:
        """Check whether repository is the one running the workflow (case-insensitive)."""
        if not self.repository:
            return False
        return repository.upper() == self.repository.upper()

    def tag_name(self) -> str | None:
        """Return the tag name, or None when the run was not triggered by a tag."""
        if not self.ref or not self.ref.startswith(TAG_REF_PREFIX):
            return None
        return self.ref[len(TAG_REF_PREFIX):] or None


def write_outputs(output_path: str | Path, outputs: Mapping[str, str]) -> None:
    """Append step outputs to the GITHUB_OUTPUT file.

    Single-line values are written as ``name=value``. Multi-line values use
    the delimiter form::

        name<<ghadelimiter_<uuid>
        line 1
        line 2
        ghadelimiter_<uuid>

    Args:
        output_path: Path of the output file
        outputs: Output names and values
    """
    lines: list[str] = []
    for name, value in outputs.items():
        if "\n" in value or "\r" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            while delimiter in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
            lines.append(f"{name}<<{delimiter}")
            lines.append(value)
            lines.append(delimiter)
        else:
            lines.append(f"{name}={value}")

    with open(output_path, "a", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    logger.debug(f"Wrote outputs {sorted(outputs)} to {output_path}")


def error_annotation(message: str) -> str:
    """Format message as a workflow error command.

    Example:
        >>> error_annotation("bad\\ninput")
        '::error::bad%0Ainput'
    """
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"::error::{escaped}"
