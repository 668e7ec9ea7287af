from typer.testing import CliRunner
from sleeppdf.cli.cli import app

def test_cli_help_lists_commands():
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for name in ("init", "add-user", "set-tier", "status", "add-plan", "list-plans", "export", "render"):
        assert name in result.output
