"""
Tests for the remote service clients.

A small aiohttp application stands in for the client directory and the
appointment scheduler so real HTTP requests are exercised.
"""

import logging
from datetime import datetime, timezone

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from services.api_client import ApiError, AppointmentSchedulerClient, ClientDirectoryClient

CLIENTS = [
    {'id': 'c1', 'name': 'Jane Doe', 'email': 'jane@x.com', 'phone': '555-1111'},
    {'id': 'c2', 'name': 'John Roe', 'email': 'john@x.com', 'phone': '555-2222'}
]


def make_service(requests):
    """Fake remote service recording every request it receives."""

    async def record(request):
        body = await request.text()
        requests.append({
            'method': request.method,
            'path': request.path,
            'query': dict(request.query),
            'body': body,
            'content_type': request.headers.get('Content-Type')
        })
        return body

    async def json_handler(request):
        await record(request)
        return web.json_response(CLIENTS)

    async def created_handler(request):
        body = await record(request)
        data = dict(await request.json()) if body else {}
        data['id'] = 'new-id'
        return web.json_response(data, status=201)

    async def text_handler(request):
        await record(request)
        return web.Response(text='Sync completed')

    async def empty_handler(request):
        await record(request)
        return web.Response(status=204)

    async def conflict_handler(request):
        await record(request)
        return web.Response(status=400, text='Appointment slot is already booked')

    async def server_error_handler(request):
        await record(request)
        return web.Response(status=500, text='boom')

    app = web.Application()
    app.router.add_route('*', '/clients', json_handler)
    app.router.add_get('/clients/search', json_handler)
    app.router.add_post('/clients/sync', text_handler)
    app.router.add_get('/clients/{id}', json_handler)
    app.router.add_put('/clients/{id}', created_handler)
    app.router.add_delete('/clients/{id}', empty_handler)
    app.router.add_get('/appointments', json_handler)
    app.router.add_post('/appointments', created_handler)
    app.router.add_get('/appointments/upcoming', json_handler)
    app.router.add_get('/appointments/today', json_handler)
    app.router.add_get('/appointments/range', json_handler)
    app.router.add_post('/appointments/sync', text_handler)
    app.router.add_get('/appointments/client/{client_id}', json_handler)
    app.router.add_get('/appointments/status/{status}', json_handler)
    app.router.add_get('/appointments/stats/count/{status}', text_handler)
    app.router.add_get('/appointments/{id}', json_handler)
    app.router.add_put('/appointments/{id}', created_handler)
    app.router.add_patch('/appointments/{id}/cancel', empty_handler)
    app.router.add_delete('/appointments/{id}', empty_handler)
    app.router.add_get('/broken', server_error_handler)
    app.router.add_post('/conflict', conflict_handler)
    return app


def base_url(server: TestServer) -> str:
    return f"http://{server.host}:{server.port}"


class TestClientDirectoryClient:
    """Client directory operations hit the right method and path."""

    @pytest.mark.asyncio
    async def test_list_clients_returns_parsed_json(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = ClientDirectoryClient(base_url(server))
            result = await api.list_clients()

        assert result == CLIENTS
        assert requests[0]['method'] == 'GET'
        assert requests[0]['path'] == '/clients'
        assert requests[0]['content_type'] == 'application/json'

    @pytest.mark.asyncio
    async def test_search_clients_encodes_name(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = ClientDirectoryClient(base_url(server))
            await api.search_clients('Jane & Co')

        assert requests[0]['path'] == '/clients/search'
        assert requests[0]['query'] == {'name': 'Jane & Co'}

    @pytest.mark.asyncio
    async def test_write_operations(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = ClientDirectoryClient(base_url(server))
            created = await api.create_client({'name': 'New'})
            await api.get_client('c1')
            await api.update_client('c1', {'name': 'Renamed'})
            deleted = await api.delete_client('c1')
            synced = await api.sync_clients()

        assert created == CLIENTS
        assert deleted == ''
        assert synced == 'Sync completed'
        assert [(r['method'], r['path']) for r in requests] == [
            ('POST', '/clients'),
            ('GET', '/clients/c1'),
            ('PUT', '/clients/c1'),
            ('DELETE', '/clients/c1'),
            ('POST', '/clients/sync')
        ]
        assert requests[0]['body'] == '{"name": "New"}'
        assert requests[2]['body'] == '{"name": "Renamed"}'


class TestAppointmentSchedulerClient:
    """Appointment scheduler operations hit the right method and path."""

    @pytest.mark.asyncio
    async def test_create_appointment_sends_json(self):
        requests = []
        payload = {'clientId': 'c1', 'time': '2025-01-01T10:00:00', 'notes': None}
        async with TestServer(make_service(requests)) as server:
            api = AppointmentSchedulerClient(base_url(server))
            created = await api.create_appointment(payload)

        assert created == {**payload, 'id': 'new-id'}
        assert requests[0]['method'] == 'POST'
        assert requests[0]['path'] == '/appointments'
        assert requests[0]['body'] == '{"clientId": "c1", "time": "2025-01-01T10:00:00", "notes": null}'

    @pytest.mark.asyncio
    async def test_read_operations(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = AppointmentSchedulerClient(base_url(server))
            await api.list_appointments()
            await api.list_upcoming()
            await api.list_today()
            await api.get_appointment('a1')
            await api.list_by_client('c1')
            await api.list_by_status('SCHEDULED')
            count = await api.count_by_status('CANCELLED')

        assert count == 'Sync completed'
        assert [r['path'] for r in requests] == [
            '/appointments',
            '/appointments/upcoming',
            '/appointments/today',
            '/appointments/a1',
            '/appointments/client/c1',
            '/appointments/status/SCHEDULED',
            '/appointments/stats/count/CANCELLED'
        ]
        assert all(r['method'] == 'GET' for r in requests)

    @pytest.mark.asyncio
    async def test_list_in_range_formats_datetimes(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = AppointmentSchedulerClient(base_url(server))
            start = datetime(2025, 1, 1, 8, 0, 0, 500, tzinfo=timezone.utc)
            await api.list_in_range(start, '2025-01-02T08:00:00')

        assert requests[0]['path'] == '/appointments/range'
        assert requests[0]['query'] == {
            'startTime': '2025-01-01T08:00:00',
            'endTime': '2025-01-02T08:00:00'
        }

    @pytest.mark.asyncio
    async def test_state_changing_operations(self):
        requests = []
        async with TestServer(make_service(requests)) as server:
            api = AppointmentSchedulerClient(base_url(server))
            await api.update_appointment('a1', {'notes': 'x'})
            await api.cancel_appointment('a1')
            await api.delete_appointment('a1')
            await api.sync_appointments()

        assert [(r['method'], r['path']) for r in requests] == [
            ('PUT', '/appointments/a1'),
            ('PATCH', '/appointments/a1/cancel'),
            ('DELETE', '/appointments/a1'),
            ('POST', '/appointments/sync')
        ]


class TestErrorHandling:
    """Failures carry status and body, get logged, and propagate."""

    @pytest.mark.asyncio
    async def test_http_error_message_embeds_status_and_body(self, caplog):
        async with TestServer(make_service([])) as server:
            api = AppointmentSchedulerClient(base_url(server))
            with caplog.at_level(logging.ERROR):
                with pytest.raises(ApiError) as exc_info:
                    await api._request('POST', '/conflict', payload={})

        error = exc_info.value
        assert error.status == 400
        assert error.body == 'Appointment slot is already booked'
        assert str(error) == 'HTTP 400: Appointment slot is already booked'
        assert 'API call failed' in caplog.text

    @pytest.mark.asyncio
    async def test_server_error(self):
        async with TestServer(make_service([])) as server:
            api = ClientDirectoryClient(base_url(server))
            with pytest.raises(ApiError, match='HTTP 500: boom'):
                await api._request('GET', '/broken')

    @pytest.mark.asyncio
    async def test_not_found(self):
        async with TestServer(make_service([])) as server:
            api = ClientDirectoryClient(base_url(server))
            with pytest.raises(ApiError) as exc_info:
                await api._request('GET', '/nowhere')

        assert exc_info.value.status == 404

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self):
        """Connection errors surface unchanged."""
        api = ClientDirectoryClient('http://127.0.0.1:1')
        with pytest.raises(aiohttp.ClientError):
            await api.list_clients()


def test_base_urls_default_to_config():
    from config.settings import config
    assert ClientDirectoryClient().base_url == config.CLIENT_SERVICE_URL
    assert AppointmentSchedulerClient().base_url == config.APPOINTMENT_SERVICE_URL
    assert ClientDirectoryClient('http://svc/').base_url == 'http://svc'
