from __future__ import annotations

from rich.table import Table

from agrismart_client.endpoints import API_ENDPOINTS, ENDPOINT_GROUPS

from .. import console


def list_endpoints() -> None:
    """Print the REST endpoint catalog."""
    table = Table(title="AgriSmart API endpoints")
    table.add_column("Group", style="cyan")
    table.add_column("Name")
    table.add_column("Path", style="green")
    for group, names in ENDPOINT_GROUPS:
        for name in names:
            table.add_row(group, name, API_ENDPOINTS[name])
    console.print(table)
