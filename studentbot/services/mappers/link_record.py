# studentbot/services/mappers/link_record.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Union

from pydantic import TypeAdapter, ValidationError

from studentbot.common.logging import get_logger
from studentbot.common.settings import get_settings
from studentbot.domain.entities.link_record import LinkRecord
from studentbot.services.schemas.link_record import (
    LinkRecordBase, LinkRecordPatch, LinkRecordRead,
)

logger = get_logger(__name__)

Payload = Union[Mapping[str, Any], str, bytes]

_LIST_ADAPTER = TypeAdapter(List[LinkRecordRead])


def to_domain(s: LinkRecordBase) -> LinkRecord:
    return LinkRecord(tag_name=s.tag_name, link=s.link)

def apply_patch_to_domain(record: LinkRecord, p: LinkRecordPatch) -> LinkRecord:
    for k, v in p.model_dump(exclude_unset=True).items():
        setattr(record, k, v)
    return record

def to_read_schema(record: LinkRecord) -> LinkRecordRead:
    return LinkRecordRead(tag_name=record.tag_name, link=record.link)


# ---------- Payload codec ----------

def dump_payload(record: LinkRecord) -> Dict[str, Any]:
    """Serialized form as a mapping; key spelling follows PAYLOAD__BY_ALIAS."""
    cfg = get_settings().payload
    return to_read_schema(record).model_dump(by_alias=cfg.by_alias, exclude_none=cfg.exclude_none)

def dumps_payload(record: LinkRecord) -> str:
    cfg = get_settings().payload
    return to_read_schema(record).model_dump_json(by_alias=cfg.by_alias, exclude_none=cfg.exclude_none)

def load_payload(data: Payload) -> LinkRecord:
    """
    Decode one record from a mapping or JSON text/bytes.
    Accepts both "tagName" and "tag_name". Raises ValueError on bad input.
    """
    try:
        if isinstance(data, (str, bytes)):
            s = LinkRecordRead.model_validate_json(data)
        else:
            s = LinkRecordRead.model_validate(data)
    except ValidationError as e:
        logger.warning("Rejected link record payload: %d error(s)", e.error_count())
        raise ValueError("Invalid link record payload") from e
    return to_domain(s)

def dumps_payload_list(records: Iterable[LinkRecord]) -> str:
    cfg = get_settings().payload
    schemas = [to_read_schema(r) for r in records]
    raw = _LIST_ADAPTER.dump_json(schemas, by_alias=cfg.by_alias, exclude_none=cfg.exclude_none)
    return raw.decode("utf-8")

def load_payload_list(data: Union[Iterable[Mapping[str, Any]], str, bytes]) -> List[LinkRecord]:
    try:
        if isinstance(data, (str, bytes)):
            rows = _LIST_ADAPTER.validate_json(data)
        else:
            rows = _LIST_ADAPTER.validate_python(list(data))
    except ValidationError as e:
        logger.warning("Rejected link record list payload: %d error(s)", e.error_count())
        raise ValueError("Invalid link record list payload") from e
    except TypeError as e:
        # not iterable at all
        logger.warning("Rejected link record list payload: %s", e)
        raise ValueError("Invalid link record list payload") from e
    logger.debug("Decoded %d link record(s)", len(rows))
    return [to_domain(r) for r in rows]
