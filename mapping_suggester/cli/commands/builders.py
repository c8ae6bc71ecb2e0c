import click
from rich.console import Console
from rich.table import Table

from ...infrastructure.container import create_default_container

console = Console()


@click.command()
def list_builders_command() -> None:
    """List the token builders of the default registry in evaluation order."""
    table = Table(title="Token Builders")
    table.add_column("Builder", style="cyan", no_wrap=True)
    table.add_column("Priority", justify="right")
    table.add_column("Field Types")
    for builder in create_default_container().create_registry():
        types = ", ".join(sorted(builder.supported_types)) or "any"
        table.add_row(type(builder).__name__, str(builder.priority), types)
    console.print(table)
