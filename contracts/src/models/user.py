from pydantic import Field
from typing import List, Optional
from datetime import datetime

from contracts.src.models.base import ContractModel

class UserIdentity(ContractModel):
    """An identity of a user in one of the connected systems."""
    source: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None

class UserGroup(ContractModel):
    source: Optional[str] = None
    name: Optional[str] = None

class User(ContractModel):
    name: Optional[str] = None
    active: bool = False
    identities: List[UserIdentity] = Field(default_factory=list)
    groups: List[UserGroup] = Field(default_factory=list)

    @property
    def email(self) -> Optional[str]:
        """First non-empty email across the user's identities."""
        for identity in self.identities:
            if identity.email:
                return identity.email
        return None

class Group(ContractModel):
    id: Optional[str] = None
    name: Optional[str] = None

class Organization(ContractModel):
    id: Optional[str] = None
    name: Optional[str] = None

class Label(ContractModel):
    key: str
    value: str

class Client(ContractModel):
    """A client application authenticating with id and secret."""
    id: Optional[str] = None
    name: Optional[str] = None
    client_id: Optional[str] = Field(None, alias="clientID")
    client_secret: Optional[str] = Field(None, alias="clientSecret")
    roles: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    active: bool = False
