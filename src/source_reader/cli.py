
"""CLI implementation for source-reader."""

import json
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer

from . import open_reader
from .io.base import CHUNK_SIZE
from .core.model import Result
from .core.util import result_asdict

app = typer.Typer(add_completion=False, help="Read local paths, URLs or stdin and write their bytes out.")

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _count_bytes(stream) -> int:
    total = 0
    while chunk := stream.read(CHUNK_SIZE):
        total += len(chunk)
    return total


@app.command()
def main(
    sources: list[str] = typer.Argument(None, help="Files or URLs to read, or '-' for stdin"),
    info: bool = typer.Option(False, "--info", help="Emit a JSON record per source instead of its bytes"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Force JSON-lines output with --info"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to PATH instead of stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each source as it is opened"),
):
    """Concatenate the bytes of one or many sources, or report on them."""
    _configure_logging(verbose)
    if not sources:
        typer.echo("No input sources given.", err=True)
        raise typer.Exit(code=1)

    # open output sink
    sink = open(output, "wb") if output else sys.stdout.buffer
    results: list[Result] = []
    try:
        for src in sources:
            try:
                with open_reader(src) as stream:
                    if info:
                        size = _count_bytes(stream)
                    else:
                        shutil.copyfileobj(stream, sink)
                        size = 0  # only reported with --info
            except OSError as e:
                logger.debug("reading %s failed", src, exc_info=True)
                results.append(Result(source=src, success=False, bytes_read=0, error=str(e)))
                if not info:
                    typer.echo(f"{src}: {e}", err=True)
                continue
            results.append(Result(source=src, success=True, bytes_read=size))

        if info:
            if len(results) == 1 and not jsonl:
                sink.write(json.dumps(result_asdict(results[0]), indent=2).encode("utf-8") + b"\n")
            else:
                for res in results:
                    sink.write(json.dumps(result_asdict(res)).encode("utf-8") + b"\n")
        sink.flush()
    finally:
        if output:
            sink.close()

    # exit code
    if any(not r.success for r in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
