import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, List

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

ALWAYS_INCLUDE = "always_include"


# -----------------------------------------------------------------------------
# Entity serialization
# -----------------------------------------------------------------------------
def _always_included(entity: Any) -> set[str]:
    """Output keys of the fields declared always-included."""
    if isinstance(entity, BaseModel):
        fields = type(entity).model_fields
        return {
            info.serialization_alias or info.alias or name
            for name, info in fields.items()
            if isinstance(info.json_schema_extra, dict) and info.json_schema_extra.get(ALWAYS_INCLUDE)
        }

    if dataclasses.is_dataclass(entity):
        return {f.name for f in dataclasses.fields(entity) if f.metadata.get(ALWAYS_INCLUDE)}

    return set()


def _slot_names(entity: Any) -> List[str]:
    names: List[str] = []
    for klass in reversed(type(entity).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in names and not slot.startswith("_") and hasattr(entity, slot):
                names.append(slot)
    return names


def _is_named_tuple(entity: Any) -> bool:
    return isinstance(entity, tuple) and hasattr(entity, "_asdict")


def entity_to_dict(entity: Any) -> Dict[str, Any]:
    """
    Flatten an entity into its JSON field set.

    Pydantic models honor aliases and Field(exclude=True). Named tuples and
    slotted classes contribute their named attributes. Fields holding None
    are dropped unless declared always-included. Raises ValueError for values
    that have no field set (scalars, sequences) or cannot be serialized.
    """
    try:
        if isinstance(entity, BaseModel):
            data = entity.model_dump(mode="json", by_alias=True)
        elif dataclasses.is_dataclass(entity) and not isinstance(entity, type):
            data = to_jsonable_python(entity)
        elif isinstance(entity, Mapping):
            data = to_jsonable_python(dict(entity))
        elif _is_named_tuple(entity):
            data = to_jsonable_python(entity._asdict())
        elif isinstance(entity, type):
            raise ValueError(f"{entity.__name__} is a type, not an entity")
        elif hasattr(entity, "__dict__") or _slot_names(entity):
            attributes = {k: v for k, v in getattr(entity, "__dict__", {}).items() if not k.startswith("_")}
            for name in _slot_names(entity):
                attributes.setdefault(name, getattr(entity, name))
            data = to_jsonable_python(attributes)
        else:
            raise ValueError(f"{type(entity).__name__} value has no field set to render")
    except PydanticSerializationError as e:
        raise ValueError(f"Cannot serialize {type(entity).__name__}: {e}") from e

    keep = _always_included(entity)
    return {k: v for k, v in data.items() if v is not None or k in keep}


def entity_fields(entity: Any) -> List[Dict[str, Any]]:
    """Field set as a list of name/value pairs, the shape Collection+JSON and UBER use."""
    return [{"name": k, "value": v} for k, v in entity_to_dict(entity).items()]
