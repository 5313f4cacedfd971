import asyncio
from pathlib import Path
from typing import Optional

import typer

from ideator.factory import create_orchestrator
from ideator.models.pipeline import PipelineState
from ideator.presentation import render_report
from ideator.utils.logger import logger

app = typer.Typer()


@app.callback()
def callback():
    """
    Evaluate startup ideas with Gemini.
    """


@app.command()
def evaluate(
    idea: str = typer.Argument(..., help="Describe your startup idea in detail"),
    image_out: Optional[Path] = typer.Option(None, "--image-out", help="Where to write the prototype image"),
    as_json: bool = typer.Option(False, "--json", help="Print the evaluation as JSON"),
):
    """
    Run one evaluation: structured analysis first, then a prototype image.
    """
    if not idea.strip():
        typer.echo("Please describe your idea before analyzing it.", err=True)
        raise typer.Exit(code=1)

    orchestrator = create_orchestrator()
    state = asyncio.run(orchestrator.submit(idea))
    view = orchestrator.snapshot()

    if as_json:
        typer.echo(view.model_dump_json(indent=2))
    else:
        typer.echo(render_report(view))

    if state is not PipelineState.SUCCEEDED:
        raise typer.Exit(code=1)

    if image_out is not None:
        if view.prototype_image is None:
            typer.echo("No prototype image was generated; nothing written.", err=True)
        else:
            try:
                image_out.write_bytes(view.prototype_image.data)
            except OSError as e:
                typer.echo(f"Could not write prototype image to {image_out}: {e}", err=True)
                raise typer.Exit(code=1)
            logger.info(f"Prototype image written to {image_out}")


if __name__ == "__main__":
    app()
