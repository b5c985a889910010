# studentbot/domain/entities/link_record.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class LinkRecord:
    """
    A link labelled with a tag (e.g. a topic or hashtag).
    Plain mutable value: no validation, equality is field-by-field.
    Absent values are None; "" is kept as-is.
    """
    tag_name: Optional[str] = None
    link: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
