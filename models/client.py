"""Client data models."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Client:
    """Clinic client as held by the client directory service."""

    id: str
    name: str = ''
    email: str = ''
    phone: str = ''

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Client':
        """Create Client from a client service record."""
        return cls(
            id=data['id'],
            name=data.get('name') or '',
            email=data.get('email') or '',
            phone=data.get('phone') or ''
        )
