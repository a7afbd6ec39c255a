"""Appointment form view: client selector, validation and submission."""

from datetime import datetime
from typing import Any, Callable, List, Optional
from config.constants import (
    MSG_APPOINTMENT_CREATE_FAILED,
    MSG_APPOINTMENT_CREATED,
    MSG_FORM_CLIENTS_LOAD_FAILED,
    MSG_INVALID_APPOINTMENT,
    MSG_SLOT_ALREADY_BOOKED,
    SUBMIT_STATUS_ERROR,
    SUBMIT_STATUS_IDLE,
    SUBMIT_STATUS_SUBMITTING,
    SUBMIT_STATUS_SUCCESS,
    VIEW_STATUS_ERROR,
    VIEW_STATUS_LOADING_CLIENTS,
    VIEW_STATUS_READY
)
from models.client import Client
from services.api_client import AppointmentSchedulerClient, ClientDirectoryClient
from utils.formatting import time_input_value, to_wire_time
from utils.logger import ContextLogger, setup_logger
from utils.validators import earliest_appointment_time, validate_appointment_input

logger = setup_logger(__name__)


def classify_submit_error(error: Exception) -> str:
    """
    Map a failed creation request to a user-facing message.

    The scheduler only reports conflicts and validation problems in the
    error text, so this matches on the message.
    """
    message = str(error)
    if 'already booked' in message:
        return MSG_SLOT_ALREADY_BOOKED
    if '400' in message:
        return MSG_INVALID_APPOINTMENT
    return MSG_APPOINTMENT_CREATE_FAILED


class AppointmentFormView:
    """State for the "Schedule New Appointment" form."""

    def __init__(
        self,
        client_api: ClientDirectoryClient,
        appointment_api: AppointmentSchedulerClient,
        on_created: Optional[Callable[[Any], None]] = None
    ):
        self.client_api = client_api
        self.appointment_api = appointment_api
        self.on_created = on_created

        self.status = VIEW_STATUS_LOADING_CLIENTS
        self.submit_status = SUBMIT_STATUS_IDLE
        self.clients: List[Client] = []
        self.error = None
        self.success = None

        # Form fields
        self.client_id = ''
        self.time = ''
        self.notes = ''

    async def load_clients(self):
        """Populate the client selector, defaulting to the first client."""
        self.status = VIEW_STATUS_LOADING_CLIENTS

        try:
            data = await self.client_api.list_clients()
            self.clients = [Client.from_dict(item) for item in data]
            if self.clients:
                self.client_id = self.clients[0].id
            self.status = VIEW_STATUS_READY

        except Exception as e:
            logger.error(f"Error loading clients: {e}")
            self.error = MSG_FORM_CLIENTS_LOAD_FAILED
            self.status = VIEW_STATUS_ERROR

    @property
    def has_no_clients(self) -> bool:
        return self.status == VIEW_STATUS_READY and not self.clients

    def min_time(self, now: Optional[datetime] = None) -> str:
        """Value for the time input's min attribute."""
        return time_input_value(earliest_appointment_time(now))

    def reset(self):
        """Clear the fields, keeping the first client selected."""
        self.client_id = self.clients[0].id if self.clients else ''
        self.time = ''
        self.notes = ''

    async def submit(
        self,
        client_id: str,
        time: str,
        notes: Optional[str] = '',
        now: Optional[datetime] = None
    ):
        """
        Validate the fields and ask the scheduler to create the appointment.

        Args:
            client_id: Selected client ID
            time: Appointment time as entered (datetime-local value)
            notes: Free-text notes; blank notes are sent as null
            now: Reference time for the future-time check

        Returns:
            Created appointment record, or None when validation or the
            request failed
        """
        self.client_id = client_id or ''
        self.time = time or ''
        self.notes = notes or ''
        self.error = None
        self.success = None

        appointment_time, validation_error = validate_appointment_input(
            self.client_id, self.time, now
        )
        if validation_error:
            self.error = validation_error
            self.submit_status = SUBMIT_STATUS_ERROR
            return None

        payload = {
            'clientId': self.client_id,
            'time': to_wire_time(appointment_time),
            'notes': self.notes.strip() or None
        }
        ctx_logger = ContextLogger(logger, client_id=self.client_id)

        self.submit_status = SUBMIT_STATUS_SUBMITTING
        try:
            created = await self.appointment_api.create_appointment(payload)

        except Exception as e:
            ctx_logger.error(f"Error creating appointment: {e}")
            self.error = classify_submit_error(e)
            self.submit_status = SUBMIT_STATUS_ERROR
            return None

        ctx_logger.info(f"Appointment scheduled for {payload['time']}")
        self.success = MSG_APPOINTMENT_CREATED
        self.submit_status = SUBMIT_STATUS_SUCCESS
        self.reset()

        if self.on_created:
            self.on_created(created)

        return created
