from nicegui import ui
from loguru import logger


class Navigation():
    '''Header bar with the title and the refresh button'''

    def __init__(self, state, on_refresh):
        '''Initializes the navigation bar'''
        self.state = state
        self.on_refresh = on_refresh
        self.refresh_button = None
        self.setup()

    def setup(self):
        '''Sets up the UI elements of the header'''
        with ui.card().classes('w-full p-6 rounded-2xl shadow-lg'):
            with ui.row().classes('w-full items-center justify-between'):
                with ui.row().classes('items-center gap-3'):
                    ui.icon('wb_sunny').classes('text-4xl text-yellow-500')
                    ui.label('UK Blue Sky Alerts').classes('text-3xl font-bold text-gray-800')
                self.refresh_button = ui.button('Refresh', icon='refresh', on_click=self.on_refresh)
            ui.label('Get notified when there are beautiful clear days in your favorite UK locations') \
                .classes('text-gray-600')
            self.updated_label = ui.label().classes('text-sm text-gray-400')
        self.update()

    def update(self):
        '''Reflects the busy flag and last update time'''
        busy = self.state.is_busy()
        self.refresh_button.set_enabled(not busy)
        if busy:
            self.refresh_button.props('loading')
        else:
            self.refresh_button.props(remove='loading')
        if self.state.last_updated:
            local_time = self.state.last_updated.astimezone()
            self.updated_label.set_text(f"Last updated {local_time.strftime('%H:%M')}")
        logger.debug(f"Header updated, busy={busy}")
