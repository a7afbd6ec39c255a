"""HTTP clients for the client directory and appointment scheduling services."""

import aiohttp
from datetime import datetime
from typing import Any, Dict, Optional, Union
from config.settings import config
from utils.formatting import to_wire_time
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ApiError(Exception):
    """Non-success HTTP response from a remote service."""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"HTTP {status}: {body}")


class ServiceClient:
    """Thin JSON-over-HTTP client for one remote service."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip('/')

    async def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Send a request and decode the response.

        Args:
            method: HTTP method
            path: Resource path, appended to the base URL
            payload: Optional JSON body
            params: Optional query parameters

        Returns:
            Parsed JSON when the service answers with a JSON content type,
            otherwise the raw response text

        Raises:
            ApiError: on any non-2xx status
        """
        url = f"{self.base_url}{path}"
        headers = {'Content-Type': 'application/json'}

        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(
                    method,
                    url,
                    json=payload,
                    params=params,
                    headers=headers
                ) as response:
                    if not 200 <= response.status < 300:
                        error_text = await response.text()
                        raise ApiError(response.status, error_text)

                    content_type = response.headers.get('Content-Type', '')
                    if 'application/json' in content_type:
                        return await response.json()

                    return await response.text()

        except Exception as e:
            logger.error(f"API call failed: {method} {url}: {e}")
            raise


class ClientDirectoryClient(ServiceClient):
    """Client directory service operations."""

    def __init__(self, base_url: Optional[str] = None):
        super().__init__(base_url or config.CLIENT_SERVICE_URL)

    async def list_clients(self):
        return await self._request('GET', '/clients')

    async def get_client(self, client_id: str):
        return await self._request('GET', f'/clients/{client_id}')

    async def search_clients(self, name: str):
        return await self._request('GET', '/clients/search', params={'name': name})

    async def create_client(self, client_data: Dict[str, Any]):
        return await self._request('POST', '/clients', payload=client_data)

    async def update_client(self, client_id: str, client_data: Dict[str, Any]):
        return await self._request('PUT', f'/clients/{client_id}', payload=client_data)

    async def delete_client(self, client_id: str):
        return await self._request('DELETE', f'/clients/{client_id}')

    async def sync_clients(self):
        """Ask the directory to pull clients from its upstream source."""
        return await self._request('POST', '/clients/sync')


class AppointmentSchedulerClient(ServiceClient):
    """Appointment scheduling service operations."""

    def __init__(self, base_url: Optional[str] = None):
        super().__init__(base_url or config.APPOINTMENT_SERVICE_URL)

    async def list_appointments(self):
        return await self._request('GET', '/appointments')

    async def list_upcoming(self):
        return await self._request('GET', '/appointments/upcoming')

    async def list_today(self):
        return await self._request('GET', '/appointments/today')

    async def get_appointment(self, appointment_id: str):
        return await self._request('GET', f'/appointments/{appointment_id}')

    async def list_by_client(self, client_id: str):
        return await self._request('GET', f'/appointments/client/{client_id}')

    async def list_by_status(self, status: str):
        return await self._request('GET', f'/appointments/status/{status}')

    async def list_in_range(
        self,
        start_time: Union[datetime, str],
        end_time: Union[datetime, str]
    ):
        """
        List appointments scheduled between two instants.

        Args:
            start_time: Range start, datetime or wire timestamp
            end_time: Range end, datetime or wire timestamp

        Returns:
            List of appointment records
        """
        params = {
            'startTime': _wire_time(start_time),
            'endTime': _wire_time(end_time)
        }
        return await self._request('GET', '/appointments/range', params=params)

    async def create_appointment(self, appointment_data: Dict[str, Any]):
        return await self._request('POST', '/appointments', payload=appointment_data)

    async def update_appointment(self, appointment_id: str, appointment_data: Dict[str, Any]):
        return await self._request('PUT', f'/appointments/{appointment_id}', payload=appointment_data)

    async def cancel_appointment(self, appointment_id: str):
        return await self._request('PATCH', f'/appointments/{appointment_id}/cancel')

    async def delete_appointment(self, appointment_id: str):
        return await self._request('DELETE', f'/appointments/{appointment_id}')

    async def sync_appointments(self):
        """Ask the scheduler to pull appointments from its upstream source."""
        return await self._request('POST', '/appointments/sync')

    async def count_by_status(self, status: str):
        return await self._request('GET', f'/appointments/stats/count/{status}')


def _wire_time(value: Union[datetime, str]) -> str:
    if isinstance(value, datetime):
        return to_wire_time(value)
    return value
