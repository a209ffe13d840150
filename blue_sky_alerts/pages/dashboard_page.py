from nicegui import ui
from loguru import logger

from blue_sky_alerts.components.alert_banner import AlertBanner
from blue_sky_alerts.components.location_card import LocationCard
from blue_sky_alerts.components.navigation import Navigation
from blue_sky_alerts.constants.cities import SUPPORTED_CITY_NAMES
from blue_sky_alerts.exceptions import LocationNotFound
from blue_sky_alerts.utils.state_manager import DashboardState


class DashboardPage:
    '''This class represents the dashboard page.'''

    def __init__(self, state: DashboardState, sync_interval: float = 1.0):
        '''Initializes the page'''
        self.state = state
        self.sync_interval = sync_interval
        logger.info("Initializing DashboardPage")

    def create_page(self):
        """Create the dashboard for the current client"""
        ui.query('body').classes('bg-gradient-to-br from-blue-50 to-cyan-50')
        ui.query('.nicegui-content').classes('mx-auto max-w-4xl p-6')

        navigation = Navigation(self.state, on_refresh=self.refresh_handler)
        alerts = ui.element('div').classes('w-full')
        self.setup_add_location()
        grid = ui.element('div').classes('w-full grid md:grid-cols-2 gap-4')
        self.setup_info()

        rendered = {'revision': None}

        def sync():
            '''Re-renders alerts and cards when the state changed'''
            if rendered['revision'] == self.state.revision:
                return
            rendered['revision'] = self.state.revision
            navigation.update()
            alerts.clear()
            with alerts:
                AlertBanner(self.state.get_alerts())
            grid.clear()
            with grid:
                for location in self.state.get_locations():
                    LocationCard(
                        location,
                        snapshot=self.state.get_snapshot(location.id),
                        failure=self.state.get_failure(location.id),
                        remove_callback=self.remove_handler
                    )

        sync()
        # The timer belongs to this client and is removed when it disconnects
        ui.timer(self.sync_interval, sync)

    def setup_add_location(self):
        '''Sets up the add location form'''
        with ui.card().classes('w-full p-6 rounded-2xl shadow-lg'):
            ui.label('Add Location').classes('text-xl font-bold text-gray-800')
            with ui.row().classes('w-full items-center gap-2'):
                name_input = ui.input(placeholder='Enter UK city name...').classes('flex-1')
                name_input.on('keydown.enter', lambda: self.add_handler(name_input))
                ui.button('Add', icon='add', on_click=lambda: self.add_handler(name_input)).props('color=positive')
            ui.label(f"Try: {', '.join(SUPPORTED_CITY_NAMES)}").classes('text-sm text-gray-500')

    def setup_info(self):
        with ui.card().classes('w-full p-4 bg-blue-50 text-sm text-gray-600'):
            ui.label('About Blue Sky Days:').classes('font-semibold')
            ui.label('A blue sky day is defined as clear or mainly clear conditions with less than 30% cloud '
                     'cover. Perfect for outdoor activities, photography, or simply enjoying the British sunshine!')

    def add_handler(self, name_input):
        '''Handles the add button and the enter key'''
        name = (name_input.value or '').strip()
        if not name:
            return
        try:
            location = self.state.add_location(name)
        except LocationNotFound as e:
            ui.notify(f"City not found. Try: {', '.join(e.suggestions)}", type='warning')
            return
        name_input.set_value('')
        ui.notify(f"Added {location.name}")

    def remove_handler(self, location):
        '''Handles the remove button of a card'''
        self.state.remove_location(location.id)

    async def refresh_handler(self):
        '''Handles the refresh button'''
        if self.state.is_busy():
            return
        try:
            await self.state.refresh()
        except Exception as e:
            logger.error(f"Error refreshing weather: {str(e)}")
            ui.notify("Error refreshing weather", type='negative')
