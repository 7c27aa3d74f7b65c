from typing import List

import pytest
from ape._cli import cli
from click.testing import CliRunner


@pytest.fixture(scope="session")
def ape_cli():
    yield cli


class ApeFuncVariationCliRunner:
    runner = CliRunner()

    def __init__(self, cli, base_cmd: List[str]):
        self._cli = cli
        self.base_cmd = base_cmd

    def invoke(self, *cmd, ensure_successful: bool = True):
        catch_exceptions = not ensure_successful
        result = self.runner.invoke(
            self._cli, [*self.base_cmd, *cmd], catch_exceptions=catch_exceptions
        )

        if ensure_successful:
            assert result.exit_code == 0, result.output

        return result.output


@pytest.fixture
def funcvariation_cli(ape_cli):
    return ApeFuncVariationCliRunner(ape_cli, ["funcvariation"])
