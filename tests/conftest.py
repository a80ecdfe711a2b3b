from pathlib import Path

import pytest

from app.build.models import BuildEnvironmentDescription, BuildId


@pytest.fixture()
def build_environment() -> BuildEnvironmentDescription:
    """A fixed environment description, independent of the test host."""
    return BuildEnvironmentDescription(
        user="builder",
        hostname="ci-host-1",
        os="Linux 6.1",
        available_cores=8,
        system_memory_bytes=16 * 1024**3,
        python_version="3.12.1",
        tool_commit="deadbeef",
    )


@pytest.fixture()
def build_id() -> BuildId:
    return BuildId("build-1")


@pytest.fixture()
def rule_key_log(tmp_path: Path) -> Path:
    """A small rule key log file on disk."""
    path = tmp_path / "rule_key_logger.tsv"
    path.write_text("//foo:bar\tabc123\tMISS\n//foo:baz\tdef456\tHIT\n")
    return path
