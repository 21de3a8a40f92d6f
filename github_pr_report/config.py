"""Loading of the JSON report configuration.

Example::

    {
        "header": ["# Weekly report", ""],
        "users": ["mansona", "BobrImperator"],
        "exclude": ["mansona/dotfiles"],
        "labels": [
            {"name": "Ember", "repos": ["ember-engines/ember-engines"]}
        ]
    }
"""

import json
from dataclasses import dataclass, field
from typing import List

from .errors import ConfigError
from .labels import LabelGroup


@dataclass
class ReportConfig:
    labels: List[LabelGroup]
    header: List[str] = field(default_factory=list)
    users: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


def _string_list(data, key):
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def _parse_label(raw):
    if not isinstance(raw, dict):
        raise ConfigError("each label must be an object with 'name' and 'repos'")
    name = raw.get('name')
    if not isinstance(name, str):
        raise ConfigError("label is missing a 'name'")
    if 'repos' not in raw:
        raise ConfigError(f"label '{name}' is missing 'repos'")
    return LabelGroup(name=name, repos=frozenset(_string_list(raw, 'repos')))


def parse_config(data):
    """Build a ReportConfig from decoded JSON."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")
    if not isinstance(data.get('labels'), list):
        raise ConfigError("configuration must contain a 'labels' list")

    return ReportConfig(
        labels=[_parse_label(raw) for raw in data['labels']],
        header=_string_list(data, 'header'),
        users=_string_list(data, 'users'),
        exclude=_string_list(data, 'exclude'),
    )


def read_config(path):
    """Read and validate the configuration file at ``path``."""
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            data = json.load(fh)
    except (OSError, ValueError) as e:
        raise ConfigError(str(e)) from e
    return parse_config(data)
