"""CLI tests (click CliRunner against the test database)."""

import re
from uuid import uuid4

import pytest
from click.testing import CliRunner

from userwallet.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.api
class TestCli:
    """Test new-user and list-users commands."""

    def test_new_user_then_list(self, runner):
        # Arrange
        unique = uuid4().hex[:12]
        email = f"cli-{unique}@gmail.com"
        country = f"CliLand-{unique}"

        # Act
        created = runner.invoke(main, ["new-user", email, country, "24312", "Road Avenue"])
        listed = runner.invoke(main, ["list-users", "--country", country])

        # Assert
        assert created.exit_code == 0, created.output
        assert "User created: " in created.output
        assert listed.exit_code == 0, listed.output
        assert email in listed.output
        assert "1 of 1 users" in listed.output

    def test_duplicate_email_exits_with_error(self, runner):
        email = f"dup-{uuid4().hex[:12]}@gmail.com"
        runner.invoke(main, ["new-user", email, "England", "24312", "Road Avenue"])

        result = runner.invoke(main, ["new-user", email, "England", "24312", "Road Avenue"])

        assert result.exit_code == 1
        assert "User already exists" in result.output

    def test_invalid_email_exits_with_error(self, runner):
        result = runner.invoke(
            main, ["new-user", "nope", "England", "24312", "Road Avenue"]
        )

        assert result.exit_code == 1
        assert "Invalid email" in result.output

    def test_missing_arguments(self, runner):
        result = runner.invoke(main, ["new-user", "a@gmail.com"])

        assert result.exit_code == 2

    def test_update_address(self, runner):
        # Arrange
        unique = uuid4().hex[:12]
        country = f"Moved-{unique}"
        created = runner.invoke(
            main, ["new-user", f"mv-{unique}@gmail.com", "England", "24312", "Road Avenue"]
        )
        user_id = re.search(r"User created: (\S+)", created.output).group(1)

        # Act
        result = runner.invoke(main, ["update-address", user_id, "--country", country])
        listed = runner.invoke(main, ["list-users", "--country", country])

        # Assert
        assert result.exit_code == 0, result.output
        assert f"Address updated: {user_id}" in result.output
        assert user_id in listed.output

    def test_update_address_of_unknown_user(self, runner):
        result = runner.invoke(main, ["update-address", str(uuid4()), "--street", "X"])

        assert result.exit_code == 1
        assert "User not found" in result.output
