# models.py
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

class _Scrubbed:
    """Value of a field that was blanked; the key is dropped on serialization."""

    def __repr__(self):
        return 'SCRUBBED'

SCRUBBED = _Scrubbed()

def strip_scrubbed(records: List[Any]) -> List[Any]:
    return [
        {key: value for key, value in record.items() if value is not SCRUBBED}
        if isinstance(record, dict) else record
        for record in records
    ]

@dataclass
class TreeToggle:
    handle: Any
    twisty_src: Optional[str]
    icon_src: Optional[str]

@dataclass
class ErrorReport:
    path: str
    main_errors: Optional[List[Any]] = None
    action_errors: Optional[List[Any]] = None
    info_messages: Optional[List[Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'path': self.path}
        if self.main_errors:
            data['mainErrors'] = strip_scrubbed(self.main_errors)
        if self.action_errors:
            data['actionErrors'] = strip_scrubbed(self.action_errors)
        if self.info_messages:
            data['infoMessages'] = strip_scrubbed(self.info_messages)
        return data
