from dataclasses import dataclass
from typing import Optional


@dataclass
class Inspection:
    """Domain model for a transformer inspection (owned by the inspection CRUD module)"""

    inspection_number: str
    transformer_number: Optional[str] = None
    inspection_date: Optional[str] = None
    inspection_time: Optional[str] = None
    branch: Optional[str] = None
    status: Optional[str] = None
    image_url: Optional[str] = None
