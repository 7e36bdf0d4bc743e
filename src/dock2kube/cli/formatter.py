# src/dock2kube/cli/formatter.py
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from dock2kube.core.errors import ValidationError
from dock2kube.core.models import GenerationResult

console = Console()


class D2KFormatter:
    """
    D2KFormatter: renders generated documents, summaries and errors.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def print_header(self, subtitle: str, version: str):
        self.console.print(Panel.fit(
            f"[bold cyan]Dock2Kube v{version}[/bold cyan]\n"
            "══════════════════════════════════════════════",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def show_documents(self, result: GenerationResult):
        """Side-by-side view of the manifest and the Skaffold config."""
        layout_table = Table.grid(expand=True, padding=1)
        layout_table.add_column(ratio=1)
        layout_table.add_column(ratio=1)
        layout_table.add_row(
            Panel(Syntax(result.manifest_yaml.strip(), "yaml", theme="monokai", line_numbers=True),
                  title=f"[bold green]{result.manifest_path}[/bold green]", border_style="green"),
            Panel(Syntax(result.pipeline_yaml.strip(), "yaml", theme="monokai", line_numbers=True),
                  title=f"[bold cyan]{result.pipeline_path}[/bold cyan]", border_style="cyan")
        )
        self.console.print(layout_table)

    def show_summary(self, result: GenerationResult):
        table = Table(title="Dock2Kube Generation Report", show_lines=True, header_style="bold magenta")
        table.add_column("Item", style="cyan")
        table.add_column("Value", style="white")
        name_note = " [dim](generated)[/dim]" if result.name_generated else ""
        table.add_row("Name", f"{result.name}{name_note}")
        table.add_row("Manifest", result.manifest_path)
        table.add_row("Skaffold", result.pipeline_path)
        table.add_row("Written", "✅" if result.written else "[yellow]dry run[/yellow]")
        self.console.print(table)

        for note in result.notes:
            self.console.print(f"[dim]ℹ {note}[/dim]")

    def show_next_steps(self, run_hint: str):
        self.console.print("\n[bold white]Generated skaffold config and k8s manifest. Run it with:[/bold white]")
        self.console.print(f"[bold cyan]{run_hint}[/bold cyan]")

    def show_validation_error(self, error: ValidationError):
        self.console.print(Panel(
            f"[bold red]{error.kind.value}[/bold red]: {error.message}\n\n"
            f"Operation:  [white]{error.fn_name}[/white]\n"
            f"Parameter:  [white]{error.parameter_name}[/white]\n"
            f"Rule:       [white]{error.validation_name}[/white]",
            title="[bold red]Invalid command[/bold red]",
            expand=False, border_style="red"
        ))

    def show_error(self, label: str, message: str):
        self.console.print(f"[bold red]{label}:[/bold red] {message}")
