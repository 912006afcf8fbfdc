"""Config-driven graph building for fixture suites.

Turns FixtureConfig / SuiteConfig values into graphs through the family
registry, optionally checking every result against the container invariants.
"""

import logging

from topogen.config.fixtures import FixtureConfig, SuiteConfig
from topogen.config.hashing import fixture_key
from topogen.generators.registry import FAMILIES
from topogen.graph.simple import SimpleDiGraph, SimpleGraph
from topogen.graph.validation import validate_graph

log = logging.getLogger(__name__)


class InvariantViolation(Exception):
    """Raised when a built graph fails structural validation."""


def build_graph(
    config: FixtureConfig, validate: bool = False
) -> SimpleGraph | SimpleDiGraph:
    """Build the graph described by a fixture config.

    Args:
        config: Family, parameters and index dtype.
        validate: Run validate_graph on the result.

    Returns:
        The constructed graph.

    Raises:
        SizeOverflow: If a required count does not fit ``config.dtype``.
        InvariantViolation: If ``validate`` is set and validation fails.
    """
    info = FAMILIES[config.family]
    if info.arity is None:
        g = info.builder(config.args, periodic=config.periodic, dtype=config.dtype)
    else:
        g = info.builder(*config.args, dtype=config.dtype)

    if validate:
        errors = validate_graph(g)
        if errors:
            log.error(
                "Fixture %s failed validation: %s",
                fixture_key(config),
                "; ".join(errors),
            )
            raise InvariantViolation(
                f"{config.family}{tuple(config.args)} violates graph "
                f"invariants: {'; '.join(errors)}"
            )

    log.info(
        "Built %s%s (nv=%d, ne=%d, dtype=%s)",
        config.family, tuple(config.args), g.nv, g.ne, config.dtype,
    )
    return g


def build_suite(
    suite: SuiteConfig, validate: bool = True
) -> dict[str, SimpleGraph | SimpleDiGraph]:
    """Build every fixture in a suite.

    Fixtures are keyed by their name, or by fixture_key when unnamed.
    Unnamed fixtures that describe the same graph are built once.

    Args:
        suite: Suite configuration.
        validate: Validate every built graph.

    Returns:
        Mapping from fixture key to graph, in suite order.
    """
    graphs: dict[str, SimpleGraph | SimpleDiGraph] = {}
    for fixture in suite.fixtures:
        key = fixture.name or fixture_key(fixture)
        if key in graphs:
            log.debug("Fixture %s already built", key)
            continue
        graphs[key] = build_graph(fixture, validate=validate)
    log.info("Built %d fixtures for suite %r", len(graphs), suite.description)
    return graphs
