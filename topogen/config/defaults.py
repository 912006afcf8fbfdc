"""Default fixture suite: the canonical small scenarios used across tests and benchmarks."""

from topogen.config.fixtures import FixtureConfig, SuiteConfig

DEFAULT_SUITE = SuiteConfig(
    fixtures=(
        FixtureConfig("complete", (4,), name="complete_4"),
        FixtureConfig("star", (5,), name="star_5"),
        FixtureConfig("path", (1,), name="path_1"),
        FixtureConfig("path", (0,), name="path_0"),
        FixtureConfig("cycle", (3,), name="cycle_3"),
        FixtureConfig("wheel", (5,), name="wheel_5"),
        FixtureConfig("grid", (2, 3), name="grid_2x3"),
        FixtureConfig("grid", (2, 3), periodic=True, name="torus_2x3"),
        FixtureConfig("binary_tree", (3,), name="binary_tree_3"),
        FixtureConfig("clique", (3, 4), name="clique_ring_3x4"),
    ),
    description="Canonical small topologies",
    tags=("fixtures",),
)
