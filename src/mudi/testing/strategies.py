from typing import Any

import hypothesis.strategies as st
from hypothesis import event
from hypothesis.strategies import SearchStrategy

from mudi.abc.dimension import Dimension
from mudi.core.array import Array
from mudi.core.dimensions import Composite, FixedExtent, SignedRange, ZeroBasedRange

# keep axes short so composite sizes stay small
MAX_AXIS_LENGTH = 6


def fixed_extents(*, max_length: int = MAX_AXIS_LENGTH) -> SearchStrategy[FixedExtent]:
    return st.builds(FixedExtent, st.integers(min_value=1, max_value=max_length))


@st.composite
def zero_based_ranges(draw: st.DrawFn, *, max_length: int = MAX_AXIS_LENGTH) -> ZeroBasedRange:
    start = draw(st.integers(min_value=0, max_value=100))
    length = draw(st.integers(min_value=1, max_value=max_length))
    return ZeroBasedRange(start, start + length)


@st.composite
def signed_ranges(draw: st.DrawFn, *, max_length: int = MAX_AXIS_LENGTH) -> SignedRange:
    start = draw(st.integers(min_value=-100, max_value=100))
    length = draw(st.integers(min_value=1, max_value=max_length))
    return SignedRange(start, start + length)


def leaf_dimensions() -> SearchStrategy[Dimension]:
    return st.one_of(fixed_extents(), zero_based_ranges(), signed_ranges())


@st.composite
def composites(
    draw: st.DrawFn,
    *,
    min_ndim: int = 1,
    max_ndim: int = 7,
    max_depth: int = 2,
    max_length: int = MAX_AXIS_LENGTH,
) -> Composite:
    """
    Generate composite dimensions of mixed axis kinds.

    Children of composites with at most 3 axes are nested composites with some
    probability, up to ``max_depth`` levels. Axes are shorter as the number of
    axes grows, to bound the total size.
    """
    ndim = draw(st.integers(min_value=min_ndim, max_value=max_ndim))
    max_length = min(max_length, {1: MAX_AXIS_LENGTH, 2: MAX_AXIS_LENGTH, 3: 4, 4: 3}.get(ndim, 2))
    children: list[Dimension] = []
    for _ in range(ndim):
        if max_depth > 1 and ndim <= 3 and draw(st.booleans()):
            event("nested composite")
            child: Dimension = draw(
                composites(min_ndim=1, max_ndim=2, max_depth=max_depth - 1, max_length=2)
            )
        else:
            child = draw(
                st.one_of(
                    fixed_extents(max_length=max_length),
                    zero_based_ranges(max_length=max_length),
                    signed_ranges(max_length=max_length),
                )
            )
        children.append(child)
    event("ndim", ndim)
    return Composite(*children)


def dimensions() -> SearchStrategy[Dimension]:
    return st.one_of(leaf_dimensions(), composites())


@st.composite
def coordinates(draw: st.DrawFn, *, dims: Dimension) -> Any:
    """Generate a valid coordinate for ``dims``."""
    if isinstance(dims, Composite):
        return tuple(draw(coordinates(dims=child)) for child in dims)
    return draw(st.sampled_from(dims.indices()))


def elements() -> SearchStrategy[Any]:
    """Array elements of mixed types: integers, floats, strings and tuples."""
    return st.one_of(
        st.integers(min_value=-(2**31), max_value=2**31 - 1),
        st.floats(allow_nan=False),
        st.text(max_size=8),
        st.tuples(st.integers(), st.integers()),
    )


@st.composite
def arrays(
    draw: st.DrawFn,
    *,
    dims: SearchStrategy[Dimension] | None = None,
    values: SearchStrategy[Any] | None = None,
) -> Array:
    """
    Generate arrays over arbitrary dimensions.

    Unless ``values`` is given, an array holds only integers, only floats, or a
    mix drawn from ``elements``. No dtype is passed, so the storage infers it.
    """
    if dims is None:
        dims = dimensions()
    if values is None:
        values = draw(
            st.sampled_from(
                [
                    st.integers(min_value=-(2**31), max_value=2**31 - 1),
                    st.floats(allow_nan=False),
                    elements(),
                ]
            )
        )
    shape = draw(dims)
    items = draw(st.lists(values, min_size=shape.size(), max_size=shape.size()))
    return Array.from_values(items, shape)
