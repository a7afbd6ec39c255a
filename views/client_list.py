"""Client list view: loads the directory and filters it locally."""

from typing import List
from config.constants import (
    MSG_CLIENTS_LOAD_FAILED,
    VIEW_STATUS_ERROR,
    VIEW_STATUS_LOADING,
    VIEW_STATUS_READY
)
from models.client import Client
from services.api_client import ClientDirectoryClient
from utils.logger import setup_logger
from utils.validators import client_matches

logger = setup_logger(__name__)


class ClientListView:
    """State for the client list panel."""

    def __init__(self, client_api: ClientDirectoryClient):
        self.client_api = client_api
        self.status = VIEW_STATUS_LOADING
        self.error = None
        self.clients: List[Client] = []
        self.filtered_clients: List[Client] = []
        self.search_term = ''

    async def load(self):
        """Fetch all clients and reset the filtered view to match."""
        self.status = VIEW_STATUS_LOADING
        self.error = None

        try:
            data = await self.client_api.list_clients()
            self.clients = [Client.from_dict(item) for item in data]
            self.filtered_clients = list(self.clients)
            self.status = VIEW_STATUS_READY
            logger.info(f"Loaded {len(self.clients)} clients")

        except Exception as e:
            logger.error(f"Error loading clients: {e}")
            self.error = MSG_CLIENTS_LOAD_FAILED
            self.status = VIEW_STATUS_ERROR

        # Keep an active search applied across reloads
        if self.search_term:
            self._apply_filter()

    async def refresh(self):
        await self.load()

    def set_search_term(self, term: str):
        """Update the search term and re-filter the loaded clients."""
        self.search_term = term or ''
        self._apply_filter()

    def _apply_filter(self):
        if self.search_term.strip() == '':
            self.filtered_clients = list(self.clients)
        else:
            self.filtered_clients = [
                client for client in self.clients
                if client_matches(client, self.search_term)
            ]

    @property
    def is_empty(self) -> bool:
        """No clients exist at all."""
        return not self.clients

    @property
    def no_matches(self) -> bool:
        """Clients exist but none match the active search."""
        return bool(self.clients) and not self.filtered_clients

    @property
    def summary(self) -> str:
        if self.search_term.strip():
            return f"Showing {len(self.filtered_clients)} of {len(self.clients)} clients"
        return f"Total clients: {len(self.clients)}"
