from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Wire shape is {"tagName": ..., "link": ...}; "tag_name" is accepted on input too.
class LinkRecordBase(BaseModel):
    tag_name: Optional[str] = Field(default=None, alias="tagName")
    link: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, extra="ignore")

class LinkRecordCreate(LinkRecordBase):
    pass

class LinkRecordRead(LinkRecordBase):
    pass

class LinkRecordPatch(BaseModel):
    # Only fields present in the payload are applied; explicit null clears.
    tag_name: Optional[str] = Field(default=None, alias="tagName")
    link: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
