"""Appointment list view: upcoming appointments joined with their clients."""

import asyncio
from typing import Callable, Dict, List, Optional
from config.constants import (
    MSG_APPOINTMENT_CANCEL_FAILED,
    MSG_APPOINTMENT_CANCELLED,
    MSG_APPOINTMENTS_LOAD_FAILED,
    MSG_CANCEL_CONFIRM,
    VIEW_STATUS_ERROR,
    VIEW_STATUS_LOADING,
    VIEW_STATUS_READY
)
from models.appointment import Appointment, AppointmentRow
from models.client import Client
from services.api_client import AppointmentSchedulerClient, ClientDirectoryClient
from utils.logger import ContextLogger, setup_logger

logger = setup_logger(__name__)


class AppointmentListView:
    """State for the "Upcoming Appointments" panel."""

    def __init__(
        self,
        client_api: ClientDirectoryClient,
        appointment_api: AppointmentSchedulerClient
    ):
        self.client_api = client_api
        self.appointment_api = appointment_api
        self.status = VIEW_STATUS_LOADING
        self.error = None
        self.appointments: List[Appointment] = []
        self.clients: Dict[str, Client] = {}
        self.cancelling_id: Optional[str] = None
        self.notice = None
        self.notice_level = None

    async def load(self):
        """Fetch upcoming appointments and all clients, both or neither."""
        self.status = VIEW_STATUS_LOADING
        self.error = None

        try:
            appointments_data, clients_data = await asyncio.gather(
                self.appointment_api.list_upcoming(),
                self.client_api.list_clients()
            )
            self.appointments = [Appointment.from_dict(item) for item in appointments_data]
            self.clients = {}
            for item in clients_data:
                client = Client.from_dict(item)
                self.clients.setdefault(client.id, client)
            self.status = VIEW_STATUS_READY
            logger.info(f"Loaded {len(self.appointments)} upcoming appointments")

        except Exception as e:
            logger.error(f"Error loading appointments: {e}")
            self.error = MSG_APPOINTMENTS_LOAD_FAILED
            self.status = VIEW_STATUS_ERROR

    async def refresh(self):
        await self.load()

    def client_name(self, client_id: str) -> str:
        client = self.clients.get(client_id)
        return client.name if client else f"Client ID: {client_id}"

    def client_email(self, client_id: str) -> str:
        client = self.clients.get(client_id)
        return client.email if client else ''

    @staticmethod
    def can_cancel(appointment: Appointment) -> bool:
        return not appointment.is_final

    @property
    def rows(self) -> List[AppointmentRow]:
        """Appointments in service order, joined with client details."""
        return [
            AppointmentRow(
                appointment=appointment,
                client_name=self.client_name(appointment.client_id),
                client_email=self.client_email(appointment.client_id),
                can_cancel=self.can_cancel(appointment)
            )
            for appointment in self.appointments
        ]

    @property
    def summary(self) -> str:
        return f"Total upcoming appointments: {len(self.appointments)}"

    async def cancel(self, appointment_id: str, confirm: Callable[[str], bool]) -> bool:
        """
        Cancel an appointment after the user confirms, then reload everything.

        Args:
            appointment_id: Appointment to cancel
            confirm: Asked with the confirmation prompt; falsy aborts

        Returns:
            True if the appointment was cancelled
        """
        if not confirm(MSG_CANCEL_CONFIRM):
            return False

        ctx_logger = ContextLogger(logger, appointment_id=appointment_id)
        self.cancelling_id = appointment_id

        try:
            await self.appointment_api.cancel_appointment(appointment_id)
            await self.load()
            ctx_logger.info("Appointment cancelled")
            self._notify(MSG_APPOINTMENT_CANCELLED, 'success')
            return True

        except Exception as e:
            ctx_logger.error(f"Error cancelling appointment: {e}")
            self._notify(MSG_APPOINTMENT_CANCEL_FAILED, 'error')
            return False

        finally:
            self.cancelling_id = None

    def _notify(self, message: str, level: str):
        self.notice = message
        self.notice_level = level
