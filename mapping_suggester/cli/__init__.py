import click

from .commands.builders import list_builders_command
from .commands.suggest import suggest_command


@click.group()
def app() -> None:
    pass


app.add_command(suggest_command, name="suggest")
app.add_command(list_builders_command, name="builders")
__all__ = ["app"]
