# Open-Meteo current-condition fields requested for every location
CURRENT_FIELDS = ['temperature_2m', 'weather_code', 'cloud_cover']

# WMO weather codes: 0 clear sky, 1 mainly clear, 2-3 partly cloudy / overcast
CLEAR_SKY = 0
MAINLY_CLEAR = 1
OVERCAST = 3
BLUE_SKY_CODES = frozenset({CLEAR_SKY, MAINLY_CLEAR})

# Cloud cover must be strictly below this percentage for a blue sky day
BLUE_SKY_MAX_CLOUD_COVER = 30
