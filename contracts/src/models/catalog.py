from pydantic import Field
from typing import Any, Dict, List, Optional
from datetime import datetime

from contracts.src.models.base import ContractModel
from contracts.src.models.user import Label

class CatalogEntity(ContractModel):
    """Any entity stored in the catalog tree, linked to its parent by key and value."""
    id: Optional[str] = None
    parent_key: Optional[str] = None
    parent_value: Optional[str] = None
    key: Optional[str] = Field(None, alias="entity_key")
    value: Optional[str] = Field(None, alias="entity_value")
    linked_pipeline: Optional[str] = None
    labels: List[Label] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict, alias="entity_metadata")
    first_visit: Optional[datetime] = Field(None, alias="firstVisit")
    last_visit: Optional[datetime] = Field(None, alias="lastVisit")
