"""CLI entrypoint: Typer app definition and command registration"""

import typer

from sleeppdf.cli.commands import (
    add_plan_cmd,
    add_user_cmd,
    export_cmd,
    init_cmd,
    list_plans_cmd,
    render_cmd,
    set_tier_cmd,
    status_cmd,
)


app = typer.Typer(name="sleeppdf", no_args_is_help=True, help="Baby sleep schedule PDF export")

app.command(name="init")(init_cmd)
app.command(name="add-user")(add_user_cmd)
app.command(name="set-tier")(set_tier_cmd)
app.command(name="status")(status_cmd)
app.command(name="add-plan")(add_plan_cmd)
app.command(name="list-plans")(list_plans_cmd)
app.command(name="export")(export_cmd)
app.command(name="render")(render_cmd)
