# API Route Constants

# Base API
API_BASE = '/api'

# Reservation routes
RESERVATION_BASE = f'{API_BASE}/reservation'
RESERVATION_CREATE = RESERVATION_BASE
RESERVATION_LIST = RESERVATION_BASE
RESERVATION_GET = f'{RESERVATION_BASE}/{{reservation_id}}'
RESERVATION_CANCEL = f'{RESERVATION_BASE}/{{reservation_id}}/cancel'
RESERVATION_UPDATE_TIME = f'{RESERVATION_BASE}/{{reservation_id}}/time'
RESERVATION_ADMIN_ACTION = f'{RESERVATION_BASE}/{{reservation_id}}/admin-action'
RESERVATION_SUCCESSFUL = f'{RESERVATION_BASE}/{{reservation_id}}/successful'

# Admin routes
ADMIN_BASE = f'{API_BASE}/admin'
ADMIN_RESERVATIONS = f'{ADMIN_BASE}/reservations'
ADMIN_PENDING_RESERVATIONS = f'{ADMIN_BASE}/reservations/pending'
ADMIN_SEND_REMINDERS = f'{ADMIN_BASE}/send-reminders'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
