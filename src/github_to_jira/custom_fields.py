"""Populate Jira custom fields from the labels left after classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import TargetCustomField

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .config import FieldSpec


def _mapped_values(labels: Sequence[str], table: Sequence[tuple[str, str]]) -> list[str]:
    lookup = dict(table)
    return [lookup[label] for label in labels if lookup.get(label)]


def _prefixed_values(labels: Sequence[str], prefixes: Sequence[str]) -> list[str]:
    values: list[str] = []
    for label in labels:
        if not any(label.startswith(prefix) for prefix in prefixes):
            continue
        # Every prefix is removed once, in configured order
        value = label
        for prefix in prefixes:
            value = value.replace(prefix, "", 1)
        values.append(value.replace(" ", "_"))
    return values


def map_custom_fields(labels: Iterable[str], field_specs: Sequence[FieldSpec]) -> list[TargetCustomField]:
    """Build one value list per configured custom field, in configuration order.

    Args:
        labels: Label names not consumed by issue type/priority classification
        field_specs: Configured custom fields

    Returns:
        One TargetCustomField per configured field; fields with no matching label get an empty list
    """
    label_names = list(labels)
    custom_fields: list[TargetCustomField] = []
    for spec in field_specs:
        if spec.map is not None:
            values = _mapped_values(label_names, spec.map)
        else:
            values = _prefixed_values(label_names, spec.prefixes or ())
        custom_fields.append(TargetCustomField(field_name=spec.field_name, field_type=spec.field_type, value=values))
    return custom_fields
