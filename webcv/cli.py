"""
webcv command line

Scaffolds a resume project and builds it into a static website.

Commands:
    init   - Create (or safely upgrade) the scaffold files in a project
    build  - Render resume.yaml into public/

Examples:\n

    webcv init                       # Scaffold the current directory

    webcv build                      # Build resume.yaml into public/

    webcv build cv.yaml -o site      # Build another file into site/
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from webcv import __version__
from webcv.contexts.rendering.builder import build_site
from webcv.contexts.rendering.logger import setup_rendering_logger
from webcv.contexts.scaffolding.exceptions import ScaffoldConfigurationError
from webcv.contexts.scaffolding.logger import setup_scaffolding_logger
from webcv.contexts.scaffolding.orchestrator import sync_scaffold
from webcv.contexts.scaffolding.resolver import ScriptedConfirm, confirm

NEXT_STEPS = [
    "Edit 'resume.yaml' with your details.",
    "Commit and push your changes.",
    "Go to your repository settings on GitHub -> Pages -> Build and deployment "
    "-> Source -> GitHub Actions.",
    "Watch the Actions tab for your deployment!",
]


def display_path(path: Path, root: Path) -> str:
    """Return path relative to root for cleaner display."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Build a static resume website from a YAML file",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show the webcv version and exit"),
    ] = False,
):
    """Show help by default when no command is provided."""
    if version:
        typer.echo(f"webcv {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("init")
def init_command(
    project_dir: Annotated[
        Path,
        typer.Option(
            "--project-dir",
            "-d",
            help="Project directory to scaffold (default: current directory)",
            file_okay=False,
        ),
    ] = Path("."),
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Accept every template update without asking"),
    ] = False,
    no: Annotated[
        bool,
        typer.Option("--no", help="Decline every template update without asking"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show fingerprints and state file details"),
    ] = False,
):
    """
    Create or upgrade the webcv scaffold files in a project.

    Missing files are created. Files you edited are left alone unless webcv
    ships a newer version of them, in which case you are asked before anything
    is overwritten (the old file is kept as <name>.bak).

    Examples:\n

        $ webcv init                       # Scaffold the current directory

        $ webcv init -d my-resume          # Scaffold another directory

        $ webcv init --yes                 # Upgrade without prompting (CI)
    """
    if yes and no:
        typer.secho("Error: --yes and --no cannot be used together", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    project_dir = project_dir.resolve()
    project_dir.mkdir(parents=True, exist_ok=True)
    setup_scaffolding_logger(project_dir, verbose=verbose)

    typer.secho(f"\nInitializing webcv project in {project_dir}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        if yes or no:
            result = sync_scaffold(project_dir, confirm=ScriptedConfirm(default=yes))
        else:
            result = sync_scaffold(project_dir, confirm=confirm)
    except ScaffoldConfigurationError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho(
            f"✓ Initialization complete! ({result.created_or_updated} files created or updated)",
            fg=typer.colors.GREEN,
            bold=True,
        )
    else:
        error_count = len(result.errors) + (1 if result.state_error else 0)
        typer.secho(
            f"✗ Initialization finished with {error_count} errors "
            f"({result.created_or_updated} files created or updated)",
            fg=typer.colors.RED,
            bold=True,
        )
        for outcome in result.errors:
            typer.secho(f"  - {outcome.destination}: {outcome.error}", fg=typer.colors.RED)
        if result.state_error:
            typer.secho(f"  - {result.state_error}", fg=typer.colors.RED)
        typer.echo("Re-run 'webcv init' after fixing the problem to retry those files.")

    typer.echo("\nNext steps:")
    for i, step in enumerate(NEXT_STEPS, 1):
        typer.echo(f"{i}. {step}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("build")
def build_command(
    input_file: Annotated[
        Optional[Path],
        typer.Argument(help="Resume file to build (default: resume.yaml)"),
    ] = None,
    project_dir: Annotated[
        Path,
        typer.Option(
            "--project-dir",
            "-d",
            help="Project directory holding config.yaml (default: current directory)",
            file_okay=False,
        ),
    ] = Path("."),
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory (default: <project>/public)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show copied stylesheets and assets"),
    ] = False,
):
    """
    Render a resume into a static website.

    Examples:\n

        $ webcv build                      # Build resume.yaml into public/

        $ webcv build cv.yaml              # Build a different resume file

        $ webcv build -o docs              # Write the site to docs/
    """
    project_dir = project_dir.resolve()
    input_path = input_file.resolve() if input_file else None
    setup_rendering_logger(input_path or project_dir / "resume.yaml", verbose=verbose)

    result = build_site(input_path=input_path, project_dir=project_dir, output_dir=output_dir)

    typer.echo("")
    if result.success:
        typer.secho("✓ Build complete", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Theme: {result.theme}")
        typer.echo(f"  Page: {display_path(result.html_path, project_dir)}")
    else:
        typer.secho("✗ Build failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED, err=True)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


if __name__ == "__main__":
    app()
