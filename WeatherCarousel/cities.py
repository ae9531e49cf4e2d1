"""The fixed set of cities shown on the dashboard, in display order."""
from typing import Tuple

from weather_data import City


CITIES: Tuple[City, ...] = (
    City("New York", "US", "NYC", 40.7128, -74.006),
    City("London", "GB", "LON", 51.5074, -0.1278),
    City("Tokyo", "JP", "TOK", 35.6762, 139.6503),
    City("Sydney", "AU", "SYD", -33.8688, 151.2093),
    City("Paris", "FR", "PAR", 48.8566, 2.3522),
    City("Dubai", "AE", "DXB", 25.2048, 55.2708),
    City("Singapore", "SG", "SIN", 1.3521, 103.8198),
    City("Mumbai", "IN", "BOM", 19.076, 72.8777),
    City("São Paulo", "BR", "SAO", -23.5505, -46.6333),
    City("Cairo", "EG", "CAI", 30.0444, 31.2357),
    City("Moscow", "RU", "MOW", 55.7558, 37.6176),
    City("Bangkok", "TH", "BKK", 13.7563, 100.5018),
)
