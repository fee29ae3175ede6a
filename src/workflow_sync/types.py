from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

@dataclass
class TreeNode:
    """Snapshot of a host node. Identified by `uid`; not kept across store calls."""
    uid: str
    text: str
    children: List["TreeNode"] = field(default_factory=list)

class TransportNode(BaseModel):
    """Host-independent node used for the wire format. Carries no identifiers."""
    model_config = ConfigDict(extra="ignore")

    text: str
    children: List["TransportNode"] = Field(default_factory=list)

@dataclass
class WorkflowMetadata:
    """Catalog fields gathered from nodes referencing a workflow root."""
    description: List[str] = field(default_factory=list)
    image: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    uuid: List[str] = field(default_factory=list)

    def first(self, label: str) -> Optional[str]:
        values = getattr(self, label)
        return values[0] if values else None
