# API Route Constants

API_BASE = '/api'

# Router prefixes; resource paths live on the routers
BOOKING_BASE = f'{API_BASE}/bookings'
MOVIE_BASE = f'{API_BASE}/movies'
USER_BASE = f'{API_BASE}/users'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
