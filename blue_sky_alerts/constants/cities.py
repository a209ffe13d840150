# Cities that can be added from the dashboard, keyed by lowercase name
SUPPORTED_CITIES = {
    'birmingham': {'lat': 52.4862, 'lon': -1.8904},
    'leeds': {'lat': 53.8008, 'lon': -1.5491},
    'glasgow': {'lat': 55.8642, 'lon': -4.2518},
    'liverpool': {'lat': 53.4084, 'lon': -2.9916},
    'edinburgh': {'lat': 55.9533, 'lon': -3.1883},
    'bristol': {'lat': 51.4545, 'lon': -2.5879},
    'cardiff': {'lat': 51.4816, 'lon': -3.1791},
    'brighton': {'lat': 50.8225, 'lon': -0.1372},
    'oxford': {'lat': 51.7520, 'lon': -1.2577},
    'cambridge': {'lat': 52.2053, 'lon': 0.1218},
}

# Seeded at startup, not addable by name
DEFAULT_LOCATIONS = [
    {'id': 1, 'name': 'London', 'lat': 51.5074, 'lon': -0.1278},
    {'id': 2, 'name': 'Manchester', 'lat': 53.4808, 'lon': -2.2426},
]

SUPPORTED_CITY_NAMES = [name.capitalize() for name in SUPPORTED_CITIES]
