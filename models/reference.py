from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Reference:
    reference_id: str
    title: str
    description: str
    ref_type: str            # "fire-code", "nfpa", "memorandum", "guideline"
    category: str
    content: str = ""
    url: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    date_published: Optional[str] = None
