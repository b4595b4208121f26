from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from sember.config import parse_config


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def minimal_config():
    """
    Config with only the required name plus one job and no [site] block.
    """
    return parse_config(
        textwrap.dedent(
            """
            [about]
            name = "Jane Doe"

            [[jobs]]
            company = "Acme Corp"
            position = "Staff Engineer"
            location = "Remote"
            description = "Built the widget pipeline."
            from = "2019"
            to = "Present"
            """
        )
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> dict:
    """
    Write a sember.toml into a fresh project directory and return metadata.
    """
    project = tmp_path / "project"
    project.mkdir()
    project = project.resolve()
    config_text = textwrap.dedent(
        """
        [about]
        name = "Jane Doe"
        email = "jane@example.com"
        photo = "img/jane.jpg"
        description = "Engineer."

        [[links]]
        label = "GitHub"
        url = "https://github.com/janedoe"

        [[jobs]]
        company = "Acme Corp"
        position = "Staff Engineer"
        location = "Remote"
        description = "Built the widget pipeline."
        from = "2019"
        to = "Present"
        """
    ).strip()
    path = project / "sember.toml"
    path.write_text(config_text + "\n", encoding="utf-8")
    return {"path": path, "project": project, "output": project / "public"}
