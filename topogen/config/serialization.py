"""JSON serialization and deserialization for fixture suite configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from topogen.config.fixtures import SuiteConfig

# strict=True rejects unknown keys; cast=[tuple] turns JSON arrays back into
# the tuple fields (fixtures, args, tags).
_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_json(config: SuiteConfig) -> str:
    """Serialize a SuiteConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> SuiteConfig:
    """Deserialize a JSON string to a SuiteConfig.

    Field validation in __post_init__ runs for the suite and every fixture.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: SuiteConfig) -> dict[str, Any]:
    """Convert a SuiteConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> SuiteConfig:
    """Reconstruct a SuiteConfig from a plain dictionary."""
    return from_dict(data_class=SuiteConfig, data=d, config=_DACITE_CONFIG)
