"""Appointment data models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from config.constants import APPOINTMENT_STATUS_SCHEDULED, FINAL_STATUSES


@dataclass
class Appointment:
    """Appointment as held by the appointment service."""

    id: str
    client_id: str
    time: str  # YYYY-MM-DDTHH:MM:SS, as sent by the service
    notes: Optional[str] = None
    status: str = APPOINTMENT_STATUS_SCHEDULED
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_final(self) -> bool:
        """True once the appointment is cancelled or completed."""
        return self.status in FINAL_STATUSES

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the service's wire representation."""
        return {
            'id': self.id,
            'clientId': self.client_id,
            'time': self.time,
            'notes': self.notes,
            'status': self.status,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Appointment':
        """Create Appointment from an appointment service record."""
        return cls(
            id=data['id'],
            client_id=data.get('clientId', ''),
            time=data.get('time') or '',
            notes=data.get('notes'),
            status=data.get('status') or APPOINTMENT_STATUS_SCHEDULED,
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


@dataclass
class AppointmentRow:
    """Appointment joined with its client's display details."""

    appointment: Appointment
    client_name: str
    client_email: str
    can_cancel: bool
