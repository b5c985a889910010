from studentbot.services.schemas.link_record import (
    LinkRecordBase,
    LinkRecordCreate,
    LinkRecordRead,
    LinkRecordPatch,
)
__all__ = [
    "LinkRecordBase",
    "LinkRecordCreate",
    "LinkRecordRead",
    "LinkRecordPatch",
]
