"""Fixture configuration system with frozen, hashable, serializable dataclasses."""

from topogen.config.fixtures import FixtureConfig, SuiteConfig
from topogen.config.defaults import DEFAULT_SUITE
from topogen.config.hashing import config_hash, fixture_key
from topogen.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "FixtureConfig",
    "SuiteConfig",
    "DEFAULT_SUITE",
    "config_hash",
    "fixture_key",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
