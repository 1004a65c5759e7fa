import logging
from typing import Annotated, Literal, NoReturn, cast

import typer

import mudi
from mudi.abc.dimension import Dimension
from mudi.core.dimensions import parse_dimension
from mudi.errors import BaseMudiError, CoordinateShapeError, IndexOutOfBoundsError

app = typer.Typer(
    help=(
        "Inspect mudi dimensions. Arguments starting with '-' (signed ranges, negative "
        "coordinates) must follow a '--' separator, e.g. 'mudi offset -- -4:10 -3'."
    )
)

logger = logging.getLogger(__name__)

DIMS_HELP = (
    "Comma-separated axes: 'N' for a fixed extent of N elements, 'START:END' for a range. "
    "Ranges starting below 0 accept negative coordinates. Example: '2,-3:3,4'."
)


def _set_logging_level(*, verbose: bool) -> None:
    if verbose:
        lvl = "INFO"
    else:
        lvl = "WARNING"
    mudi.set_log_level(cast(Literal["INFO", "WARNING"], lvl))
    mudi.set_format("%(message)s")


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise typer.BadParameter(f"expected an integer, got {text!r}") from None


def _parse_axis(text: str) -> int | range:
    if ":" in text:
        start, _, end = text.partition(":")
        return range(_parse_int(start), _parse_int(end))
    return _parse_int(text)


def parse_dims(text: str) -> Dimension:
    """Parse the command line notation for dimensions, e.g. ``2,-3:3,4``."""
    axes = [_parse_axis(axis.strip()) for axis in text.split(",")]
    try:
        if len(axes) == 1:
            dims = parse_dimension(axes[0])
        else:
            dims = parse_dimension(tuple(axes))
    except BaseMudiError as e:
        raise typer.BadParameter(str(e)) from e
    logger.info("Parsed '%s' as %r", text, dims)
    return dims


def parse_coordinate(text: str) -> int | tuple[int, ...]:
    components = [_parse_int(c.strip()) for c in text.split(",")]
    if len(components) == 1:
        return components[0]
    return tuple(components)


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback()  # type: ignore[misc]
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log how arguments are interpreted.")
    ] = False,
) -> None:
    _set_logging_level(verbose=verbose)


@app.command()  # type: ignore[misc]
def size(
    dims: Annotated[str, typer.Argument(help=DIMS_HELP)],
) -> None:
    """Print the number of elements spanned by DIMS."""
    typer.echo(parse_dims(dims).size())


@app.command()  # type: ignore[misc]
def offset(
    dims: Annotated[str, typer.Argument(help=DIMS_HELP)],
    coordinate: Annotated[
        str, typer.Argument(help="Comma-separated coordinate, one integer per axis.")
    ],
) -> None:
    """Print the row-major linear offset of COORDINATE within DIMS."""
    parsed = parse_dims(dims)
    try:
        typer.echo(parsed.offset(parse_coordinate(coordinate)))
    except (IndexOutOfBoundsError, CoordinateShapeError) as e:
        _fail(e)


@app.command()  # type: ignore[misc]
def unravel(
    dims: Annotated[str, typer.Argument(help=DIMS_HELP)],
    linear_offset: Annotated[int, typer.Argument(help="Linear offset into the flat storage.")],
) -> None:
    """Print the coordinate found at LINEAR_OFFSET within DIMS."""
    parsed = parse_dims(dims)
    try:
        typer.echo(parsed.unravel(linear_offset))
    except IndexOutOfBoundsError as e:
        _fail(e)


@app.command()  # type: ignore[misc]
def indices(
    dims: Annotated[str, typer.Argument(help=DIMS_HELP)],
) -> None:
    """Print every coordinate of DIMS with its linear offset, in storage order."""
    parsed = parse_dims(dims)
    for linear_offset, coordinate in enumerate(parsed.indices()):
        typer.echo(f"{linear_offset}\t{coordinate}")


if __name__ == "__main__":
    app()
