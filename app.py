"""
Main Application

Async web app (Quart) that serves the wellness clinic admin page:
1. Lists clients and upcoming appointments
2. Schedules new appointments
3. Cancels appointments

All data lives in the client directory and appointment services.
"""

from quart import Quart, flash, get_flashed_messages, redirect, request, render_template, url_for

from config.constants import (
    DEFAULT_STATUS_COLOR,
    FLASH_APPOINTMENT_NOTICE,
    FLASH_FORM_SUCCESS,
    STATUS_COLORS,
    SUBMIT_STATUS_SUCCESS
)
from config.settings import config
from services.api_client import AppointmentSchedulerClient, ClientDirectoryClient
from utils.formatting import format_date, format_datetime, format_time
from utils.logger import setup_logger
from views.dashboard import Dashboard

logger = setup_logger(__name__)

# Initialize Quart (async Flask)
app = Quart(__name__)
app.secret_key = config.SECRET_KEY

# Initialize service clients
client_api = ClientDirectoryClient()
appointment_api = AppointmentSchedulerClient()


def status_color(status: str) -> str:
    """Badge colour for an appointment status."""
    return STATUS_COLORS.get((status or '').upper(), DEFAULT_STATUS_COLOR)


app.add_template_filter(format_datetime, 'format_datetime')
app.add_template_filter(format_date, 'format_date')
app.add_template_filter(format_time, 'format_time')
app.add_template_filter(status_color, 'status_color')


def build_dashboard() -> Dashboard:
    return Dashboard(client_api, appointment_api)


def back_to_index():
    """Redirect to the admin page, keeping the active client search."""
    return redirect(url_for('index', q=request.args.get('q') or None), code=303)


def apply_flashed_messages(dashboard: Dashboard):
    """Show messages left by the previous create or cancel submission."""
    for category, message in get_flashed_messages(with_categories=True):
        if category == FLASH_FORM_SUCCESS:
            dashboard.form.success = message
        elif category.startswith(FLASH_APPOINTMENT_NOTICE):
            dashboard.appointment_list.notice = message
            dashboard.appointment_list.notice_level = category[len(FLASH_APPOINTMENT_NOTICE):]


async def render_dashboard(dashboard: Dashboard):
    return await render_template(
        'index.html',
        dashboard=dashboard,
        form=dashboard.form,
        client_list=dashboard.client_list,
        appointment_list=dashboard.appointment_list
    )


@app.route('/', methods=['GET'])
async def index():
    """Admin page"""
    dashboard = build_dashboard()
    await dashboard.mount(search_term=request.args.get('q', ''))
    apply_flashed_messages(dashboard)
    return await render_dashboard(dashboard)


@app.route('/appointments', methods=['POST'])
async def create_appointment():
    """
    Schedule form submission

    Redirects back to the page on success. Validation and service errors
    re-render the page so the typed values are kept.
    """
    form = await request.form
    dashboard = build_dashboard()
    await dashboard.mount(search_term=request.args.get('q', ''))

    await dashboard.create_appointment(
        client_id=form.get('clientId', ''),
        time=form.get('time', ''),
        notes=form.get('notes', '')
    )
    if dashboard.form.submit_status == SUBMIT_STATUS_SUCCESS:
        await flash(dashboard.form.success, FLASH_FORM_SUCCESS)
        return back_to_index()

    return await render_dashboard(dashboard)


@app.route('/appointments/<appointment_id>/cancel', methods=['POST'])
async def cancel_appointment(appointment_id: str):
    """Cancel button submission; always redirects back to the page"""
    form = await request.form
    dashboard = build_dashboard()
    await dashboard.mount(search_term=request.args.get('q', ''))

    await dashboard.cancel_appointment(
        appointment_id,
        confirmed=form.get('confirm') == 'yes'
    )
    appointment_list = dashboard.appointment_list
    if appointment_list.notice:
        await flash(appointment_list.notice, FLASH_APPOINTMENT_NOTICE + appointment_list.notice_level)
    return back_to_index()


@app.route('/health', methods=['GET'])
async def health():
    """Health check"""
    return {"status": "healthy"}


if __name__ == '__main__':
    logger.info(f"Client service: {config.CLIENT_SERVICE_URL}")
    logger.info(f"Appointment service: {config.APPOINTMENT_SERVICE_URL}")
    logger.info(f"Starting server on port {config.PORT}...")
    app.run(host=config.HOST, port=config.PORT)
