"""
FILE: jotter/cli/commands/system.py
PURPOSE: System commands (version, help)
"""

from ..app import app, console, __version__


@app.command()
def version():
    """Show Jotter version."""
    console.print(f"Jotter v{__version__}")


@app.command()
def help():
    """Show usage and key bindings."""
    console.print("\n[bold cyan]Jotter[/bold cyan] - Minimal terminal task list editor\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  jotter                    [dim]# Open the editor (default)[/dim]")
    console.print("  jotter --log-file PATH    [dim]# Open the editor with debug logging[/dim]\n")

    console.print("[bold]Keys:[/bold]")

    bindings = [
        ("Normal", "a", "Start adding a task"),
        ("Normal", "q", "Quit"),
        ("Editing", "Enter", "Add the input as a task"),
        ("Editing", "Esc", "Stop adding (input is kept)"),
        ("Editing", "Backspace", "Delete the last character"),
        ("Editing", "q", "Quit (unsaved input is discarded)"),
    ]

    for mode, key, desc in bindings:
        console.print(f"  [dim]{mode:8}[/dim] [green]{key:10}[/green] {desc}")

    console.print("\n[dim]Tasks live in memory only and are gone when you quit.[/dim]\n")
