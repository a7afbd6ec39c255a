"""Business constants for the wellness clinic admin interface."""

# Appointment statuses (as returned by the appointment service)
APPOINTMENT_STATUS_SCHEDULED = "SCHEDULED"
APPOINTMENT_STATUS_CONFIRMED = "CONFIRMED"
APPOINTMENT_STATUS_COMPLETED = "COMPLETED"
APPOINTMENT_STATUS_CANCELLED = "CANCELLED"
APPOINTMENT_STATUS_NO_SHOW = "NO_SHOW"

APPOINTMENT_STATUSES = [
    APPOINTMENT_STATUS_SCHEDULED,
    APPOINTMENT_STATUS_CONFIRMED,
    APPOINTMENT_STATUS_COMPLETED,
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_NO_SHOW
]

# Once in one of these, an appointment can no longer be cancelled
FINAL_STATUSES = [
    APPOINTMENT_STATUS_CANCELLED,
    APPOINTMENT_STATUS_COMPLETED
]

# Badge colours per status
STATUS_COLORS = {
    APPOINTMENT_STATUS_SCHEDULED: "#3b82f6",
    APPOINTMENT_STATUS_CONFIRMED: "#10b981",
    APPOINTMENT_STATUS_COMPLETED: "#6b7280",
    APPOINTMENT_STATUS_CANCELLED: "#ef4444",
    APPOINTMENT_STATUS_NO_SHOW: "#f59e0b"
}
DEFAULT_STATUS_COLOR = "#6b7280"

# Minimum lead time offered by the appointment time picker (in minutes)
MIN_LEAD_TIME_MINUTES = 30

# Wire format for appointment times (no fraction, no zone marker)
WIRE_TIME_FORMAT = '%Y-%m-%dT%H:%M:%S'

# Format of the datetime-local input's min attribute
INPUT_TIME_FORMAT = '%Y-%m-%dT%H:%M'

# View states
VIEW_STATUS_LOADING = "loading"
VIEW_STATUS_READY = "ready"
VIEW_STATUS_ERROR = "error"
VIEW_STATUS_LOADING_CLIENTS = "loading_clients"

# Form submission states
SUBMIT_STATUS_IDLE = "idle"
SUBMIT_STATUS_SUBMITTING = "submitting"
SUBMIT_STATUS_SUCCESS = "success"
SUBMIT_STATUS_ERROR = "error"

# Flash message categories carried across the post/redirect/get hop
FLASH_FORM_SUCCESS = "form-success"
FLASH_APPOINTMENT_NOTICE = "appointment-"

# User-facing messages
MSG_CLIENTS_LOAD_FAILED = "Failed to load clients. Please try again."
MSG_FORM_CLIENTS_LOAD_FAILED = "Failed to load clients. Please refresh the page."
MSG_APPOINTMENTS_LOAD_FAILED = "Failed to load appointments. Please try again."
MSG_REQUIRED_FIELDS = "Please fill in all required fields."
MSG_INVALID_TIME = "Please enter a valid appointment time."
MSG_TIME_NOT_FUTURE = "Appointment time must be in the future."
MSG_APPOINTMENT_CREATED = "Appointment scheduled successfully!"
MSG_SLOT_ALREADY_BOOKED = "This time slot is already booked. Please choose a different time."
MSG_INVALID_APPOINTMENT = "Invalid appointment data. Please check your inputs."
MSG_APPOINTMENT_CREATE_FAILED = "Failed to schedule appointment. Please try again."
MSG_CANCEL_CONFIRM = "Are you sure you want to cancel this appointment?"
MSG_APPOINTMENT_CANCELLED = "Appointment cancelled successfully"
MSG_APPOINTMENT_CANCEL_FAILED = "Failed to cancel appointment. Please try again."
