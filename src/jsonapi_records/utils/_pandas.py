# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from ..common.constants import KEY_ID, KEY_LINKS, NAMING_CAMEL
from ..data.marshal import marshal
from ..models.collection import ModelCollection
from ..models.schema import ModelSchema
from .naming import root_key

LINK_COLUMN_PREFIX = KEY_LINKS + "."


def _is_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple, dict)):
        return False
    return bool(pd.isna(value))


def _clean(value: Any) -> Any:
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    if isinstance(value, tuple):
        return list(value)
    return value


def _id_string(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def dataframe_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert a DataFrame to record objects, omitting missing cells and converting Timestamps to ISO strings.

    Columns named ``links.<relation>`` are collected into the record's ``"links"`` object
    and an ``id`` column is rendered as a string.
    """
    records = []
    for row in df.to_dict(orient="records"):
        record: Dict[str, Any] = {}
        links: Dict[str, Any] = {}
        for k, v in row.items():
            if _is_missing(v):
                continue
            key = str(k)
            if key.startswith(LINK_COLUMN_PREFIX):
                relation = key[len(LINK_COLUMN_PREFIX):]
                links[relation] = [_id_string(i) for i in v] if isinstance(v, (list, tuple)) else _id_string(v)
            elif key == KEY_ID:
                record[KEY_ID] = _id_string(v)
            else:
                record[key] = _clean(v)
        if links:
            record[KEY_LINKS] = links
        records.append(record)
    return records


def dataframe_to_document(df: pd.DataFrame, model: type, naming: str = NAMING_CAMEL) -> Dict[str, Any]:
    """Wrap the rows of ``df`` under the root key of ``model`` so the result can be unmarshaled.

    :param df: Input DataFrame, one row per record, columns named with document keys.
    :param model: Dataclass model the rows describe.
    :param naming: Document key convention used for the root key.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError("df must be a pandas DataFrame")
    schema = ModelSchema.for_type(model)
    return {root_key(schema.name, naming): dataframe_to_records(df)}


def models_to_dataframe(models: Iterable[Any], model: Optional[type] = None, naming: str = NAMING_CAMEL) -> pd.DataFrame:
    """One row per model instance, columns are the marshaled attribute keys with ``id`` first; links are dropped."""
    if model is None and isinstance(models, ModelCollection):
        model = models.model
    items = list(models)
    if not items:
        return pd.DataFrame()
    document = marshal(items, model, naming=naming)
    rows = []
    for record in next(iter(document.values())):
        record.pop(KEY_LINKS, None)
        rows.append(record)
    df = pd.DataFrame(rows)
    if KEY_ID in df.columns:
        df = df[[KEY_ID] + [c for c in df.columns if c != KEY_ID]]
    return df
