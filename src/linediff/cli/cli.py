"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import diff_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-oriented diff with context pruning")

app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
