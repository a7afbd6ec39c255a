"""Top-level page composition."""

import asyncio
from datetime import datetime
from typing import Optional
from services.api_client import AppointmentSchedulerClient, ClientDirectoryClient
from utils.logger import setup_logger
from views.appointment_form import AppointmentFormView
from views.appointment_list import AppointmentListView
from views.client_list import ClientListView

logger = setup_logger(__name__)


class Dashboard:
    """
    The admin page: form on top, client list and appointment list below.

    refresh_key is bumped on every successful creation and forces the
    appointment list to be rebuilt and reloaded from scratch.
    """

    def __init__(
        self,
        client_api: Optional[ClientDirectoryClient] = None,
        appointment_api: Optional[AppointmentSchedulerClient] = None
    ):
        self.client_api = client_api or ClientDirectoryClient()
        self.appointment_api = appointment_api or AppointmentSchedulerClient()
        self.refresh_key = 0

        self.form = AppointmentFormView(
            self.client_api,
            self.appointment_api,
            on_created=self.handle_appointment_created
        )
        self.client_list = ClientListView(self.client_api)
        self.appointment_list = self._new_appointment_list()

    def _new_appointment_list(self) -> AppointmentListView:
        return AppointmentListView(self.client_api, self.appointment_api)

    async def mount(self, search_term: str = ''):
        """Load every panel concurrently, then apply the client search."""
        await asyncio.gather(
            self.form.load_clients(),
            self.client_list.load(),
            self.appointment_list.load()
        )
        if search_term:
            self.client_list.set_search_term(search_term)

    def handle_appointment_created(self, appointment):
        """Discard the appointment list so it reloads on next use."""
        self.refresh_key += 1
        self.appointment_list = self._new_appointment_list()
        logger.info(f"Appointment list invalidated (refresh key {self.refresh_key})")

    async def create_appointment(
        self,
        client_id: str,
        time: str,
        notes: str = '',
        now: Optional[datetime] = None
    ):
        """Submit the form; reload the rebuilt appointment list on success."""
        refresh_key = self.refresh_key
        created = await self.form.submit(client_id, time, notes, now=now)

        if self.refresh_key != refresh_key:
            await self.appointment_list.load()

        return created

    async def cancel_appointment(self, appointment_id: str, confirmed: bool) -> bool:
        return await self.appointment_list.cancel(appointment_id, lambda prompt: confirmed)
