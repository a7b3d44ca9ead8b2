"""
Configuration loading for the GitHub to Jira conversion tool.

The configuration is a YAML document. Label tables are kept as ordered
``(label, value)`` pairs because the first matching entry wins during
classification, so the order written in the file is significant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import yaml

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: Final[str] = "config.yaml"
DEFAULT_ISSUE_TYPE: Final[str] = "Story"
DEFAULT_PRIORITY: Final[str] = "Medium"
VALID_STATES: Final[frozenset[str]] = frozenset({"open", "closed", "all"})

LabelTable = tuple[tuple[str, str], ...]

# camelCase keys of older configuration files and the keys that replace them
RENAMED_KEYS: Final[dict[str, str]] = {
    "userMap": "user_map",
    "issueTypeMap": "issue_types.map",
    "defaultIssueType": "issue_types.default",
    "priorityMap": "priorities.map",
    "defaultPriority": "priorities.default",
    "customFields": "custom_fields",
    "github.auth": "github.token",
    "github.includeComments": "github.include_comments",
    "jira.projectKey": "jira.project_key",
}


def _check_renamed_keys(data: Mapping[str, Any]) -> None:
    """Reject keys that were renamed, naming their replacement."""
    found: list[str] = []
    for old_key, new_key in RENAMED_KEYS.items():
        section, _, key = old_key.rpartition(".")
        scope = data.get(section) if section else data
        if isinstance(scope, dict) and key in scope:
            found.append(f"{old_key} -> {new_key}")
    if found:
        msg = f"Configuration uses renamed keys: {', '.join(found)}"
        raise ConfigurationError(msg)


def _section(raw: object, context: str) -> Mapping[str, Any]:
    """Return a YAML mapping section, treating a missing section as empty."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"{context} must be a mapping"
        raise ConfigurationError(msg)
    return raw


def _label_table(raw: object, context: str) -> LabelTable:
    """Turn a YAML mapping into ordered (label, value) pairs."""
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        msg = f"{context} must be a mapping of label to value"
        raise ConfigurationError(msg)
    return tuple((str(label), str(value)) for label, value in raw.items())


@dataclass(frozen=True)
class FieldSpec:
    """How one Jira custom field is populated from the remaining labels.

    Exactly one of ``map`` (explicit label -> value table) or ``prefixes``
    (strip a label prefix and use the rest as the value) must be set.
    """

    field_name: str
    field_type: str
    map: LabelTable | None = None
    prefixes: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if not self.field_name:
            msg = "Custom field configuration requires a field_name"
            raise ConfigurationError(msg)
        if (self.map is None) == (self.prefixes is None):
            msg = f"Custom field '{self.field_name}' must set exactly one of 'map' or 'prefixes'"
            raise ConfigurationError(msg)

    @classmethod
    def from_dict(cls, data: object) -> FieldSpec:
        if not isinstance(data, dict):
            msg = f"Each custom_fields entry must be a mapping, got {data!r}"
            raise ConfigurationError(msg)
        renamed = [key for key in ("fieldName", "fieldType") if key in data]
        if renamed:
            msg = f"Custom field uses renamed keys: {', '.join(renamed)} (use field_name and field_type)"
            raise ConfigurationError(msg)
        field_name = str(data.get("field_name") or "")
        raw_map = data.get("map")
        raw_prefixes = data.get("prefixes")
        if raw_prefixes is not None and not isinstance(raw_prefixes, list):
            msg = f"Custom field '{field_name}': prefixes must be a list"
            raise ConfigurationError(msg)
        return cls(
            field_name=field_name,
            field_type=str(data.get("field_type") or ""),
            map=_label_table(raw_map, f"Custom field '{field_name}' map") if raw_map is not None else None,
            prefixes=tuple(str(prefix) for prefix in raw_prefixes) if raw_prefixes is not None else None,
        )


@dataclass(frozen=True)
class LabelTableConfig:
    """An ordered label table with the value used when no label matches."""

    default: str
    map: LabelTable = ()

    @classmethod
    def from_dict(cls, data: object, default: str, section: str) -> LabelTableConfig:
        table = _section(data, section)
        return cls(default=str(table.get("default") or default), map=_label_table(table.get("map"), f"{section}.map"))


@dataclass(frozen=True)
class ConverterConfig:
    """Complete configuration for one conversion run."""

    owner: str
    repo: str
    project_key: str
    state: str = "all"
    include_comments: bool = True
    token: str | None = None
    user_map: dict[str, str] = field(default_factory=dict)
    issue_types: LabelTableConfig = field(default_factory=lambda: LabelTableConfig(default=DEFAULT_ISSUE_TYPE))
    priorities: LabelTableConfig = field(default_factory=lambda: LabelTableConfig(default=DEFAULT_PRIORITY))
    custom_fields: tuple[FieldSpec, ...] = ()

    def __post_init__(self) -> None:
        if not self.owner or not self.repo:
            msg = "Both github.owner and github.repo must be configured"
            raise ConfigurationError(msg)
        if not self.project_key:
            msg = "jira.project_key must be configured"
            raise ConfigurationError(msg)
        if self.state not in VALID_STATES:
            msg = f"Invalid github.state '{self.state}'. Expected one of: {', '.join(sorted(VALID_STATES))}"
            raise ConfigurationError(msg)

    @property
    def repo_path(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConverterConfig:
        """Build a configuration from the parsed YAML document."""
        _check_renamed_keys(data)
        github = _section(data.get("github"), "github")
        jira = _section(data.get("jira"), "jira")
        user_map = data.get("user_map") or {}
        if not isinstance(user_map, dict):
            msg = "user_map must be a mapping of GitHub login to Jira user"
            raise ConfigurationError(msg)
        raw_custom_fields = data.get("custom_fields") or []
        if not isinstance(raw_custom_fields, list):
            msg = "custom_fields must be a list"
            raise ConfigurationError(msg)

        return cls(
            owner=str(github.get("owner") or ""),
            repo=str(github.get("repo") or ""),
            state=str(github.get("state") or "all"),
            include_comments=bool(github.get("include_comments", True)),
            token=github.get("token"),
            project_key=str(jira.get("project_key") or ""),
            user_map={str(login): str(name) for login, name in user_map.items()},
            issue_types=LabelTableConfig.from_dict(data.get("issue_types"), DEFAULT_ISSUE_TYPE, "issue_types"),
            priorities=LabelTableConfig.from_dict(data.get("priorities"), DEFAULT_PRIORITY, "priorities"),
            custom_fields=tuple(FieldSpec.from_dict(spec) for spec in raw_custom_fields),
        )


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> ConverterConfig:
    """Read and validate the YAML configuration file.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    config_path = Path(path)
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f"Cannot read configuration file {config_path}: {e}"
        raise ConfigurationError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in configuration file {config_path}: {e}"
        raise ConfigurationError(msg) from e

    if not isinstance(data, dict):
        msg = f"Configuration file {config_path} must contain a YAML mapping"
        raise ConfigurationError(msg)

    config = ConverterConfig.from_dict(data)
    logger.debug(f"Loaded configuration from {config_path} for {config.repo_path} -> {config.project_key}")
    return config
