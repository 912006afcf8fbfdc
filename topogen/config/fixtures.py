"""Fixture configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

import numpy as np

from topogen.generators.registry import FAMILIES


@dataclass(frozen=True, slots=True)
class FixtureConfig:
    """One generated graph: family name plus its integer parameters.

    For the "grid" family ``args`` holds the dimensions and ``periodic``
    applies; every other family takes a fixed number of ``args``.
    """

    family: str = "complete"
    args: tuple[int, ...] = (4,)
    periodic: bool = False
    dtype: str = "int64"  # numpy integer dtype name for vertex indices
    name: str = ""  # optional key in a built suite

    def __post_init__(self) -> None:
        """Reject unknown families, wrong arity and non-integer dtypes."""
        if self.family not in FAMILIES:
            raise ValueError(
                f"Unknown family {self.family!r}; expected one of "
                f"{sorted(FAMILIES)}"
            )
        info = FAMILIES[self.family]
        if info.arity is not None and len(self.args) != info.arity:
            raise ValueError(
                f"family {self.family!r} takes {info.arity} argument(s), "
                f"got {len(self.args)}"
            )
        if self.periodic and not info.periodic:
            raise ValueError(f"family {self.family!r} has no periodic variant")
        try:
            resolved = np.dtype(self.dtype)
        except TypeError as exc:
            raise ValueError(f"Unknown dtype {self.dtype!r}") from exc
        if not np.issubdtype(resolved, np.integer):
            raise ValueError(
                f"dtype must be a numpy integer type, got {self.dtype!r}"
            )


@dataclass(frozen=True, slots=True)
class SuiteConfig:
    """A named collection of fixtures built together.

    Fixture names, where given, must be unique within the suite.
    """

    fixtures: tuple[FixtureConfig, ...] = field(default_factory=tuple)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        names = [f.name for f in self.fixtures if f.name]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate fixture names: {duplicates}")
