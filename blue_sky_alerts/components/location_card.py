from typing import Callable

from nicegui import ui

from blue_sky_alerts.models.weather import WeatherCategory

CATEGORY_ICONS = {
    WeatherCategory.SUN: 'wb_sunny',
    WeatherCategory.CLOUD: 'cloud',
    WeatherCategory.RAIN: 'water_drop',
}


class LocationCard:
    '''Card showing the latest weather for one location'''

    def __init__(self, location, snapshot=None, failure=None, remove_callback: Callable = None):
        self.location = location
        self.snapshot = snapshot
        self.failure = failure
        self.setup(remove_callback)

    def setup(self, remove_callback):
        ring = 'ring-4 ring-yellow-400' if self.snapshot and self.snapshot.is_blue_sky else ''
        with ui.card().classes(f'w-full p-6 rounded-xl shadow-lg {ring}'):
            with ui.row().classes('w-full items-start justify-between'):
                with ui.row().classes('items-center gap-2'):
                    ui.icon('place').classes('text-xl text-gray-400')
                    ui.label(self.location.name).classes('text-xl font-bold text-gray-800')
                if remove_callback:
                    ui.button(icon='close', on_click=lambda loc=self.location: remove_callback(loc)) \
                        .props('flat round dense').classes('text-gray-400')

            if self.snapshot:
                self.setup_weather()
            elif self.failure:
                ui.label('Weather unavailable').classes('text-red-400')
            else:
                ui.label('Loading...').classes('text-gray-400')

    def setup_weather(self):
        info = self.snapshot.info
        with ui.row().classes('items-center gap-4'):
            ui.icon(CATEGORY_ICONS[info.category]).classes(f'text-5xl {info.color}')
            with ui.column().classes('gap-0'):
                ui.label(f'{self.snapshot.temperature_c}°C').classes('text-4xl font-bold text-gray-800')
                ui.label(info.description).classes('text-gray-600')
        with ui.row().classes('w-full items-center justify-between text-sm'):
            ui.label(f'Cloud cover: {self.snapshot.cloud_cover_pct}%').classes('text-gray-600')
            if self.snapshot.is_blue_sky:
                ui.badge('Blue Sky Day!', color='yellow-2', text_color='yellow-10').classes('px-3 py-1 font-semibold')
