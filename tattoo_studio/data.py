# tattoo_studio/data.py

CHAIR_COUNT = 4

# whole-studio calendar shows 10:00 - 22:00
STUDIO_OPEN_HOUR = 10
STUDIO_CLOSE_HOUR = 22

# minutes offered when booking
DURATION_CHOICES = [30, 60, 90, 120, 180]
DEFAULT_DURATION = 60

DEFAULT_COLOR = "#8B5CF6"
PIXELS_PER_HOUR = 80

# label shown instead of the client's name to non-staff
MASKED_CLIENT_NAME = "Booked"

DEFAULT_CHAIRS = [
    {"id": 1, "name": "Chair 1", "work_start_hour": STUDIO_OPEN_HOUR, "work_end_hour": STUDIO_CLOSE_HOUR},
    {"id": 2, "name": "Chair 2", "work_start_hour": STUDIO_OPEN_HOUR, "work_end_hour": STUDIO_CLOSE_HOUR},
    {"id": 3, "name": "Chair 3", "work_start_hour": STUDIO_OPEN_HOUR, "work_end_hour": STUDIO_CLOSE_HOUR},
    {"id": 4, "name": "Chair 4", "work_start_hour": STUDIO_OPEN_HOUR, "work_end_hour": STUDIO_CLOSE_HOUR},
]
