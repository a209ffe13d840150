from nicegui import ui


class AlertBanner:
    '''Banner listing the active blue sky alerts'''

    def __init__(self, alerts):
        self.alerts = alerts
        if alerts:
            self.setup()

    def setup(self):
        with ui.card().classes('w-full p-6 rounded-2xl shadow-lg bg-gradient-to-r from-yellow-400 to-orange-400'):
            with ui.row().classes('items-center gap-2'):
                ui.icon('notifications_active').classes('text-2xl text-white animate-pulse')
                ui.label('Blue Sky Alert!').classes('text-2xl font-bold text-white')
            with ui.column().classes('w-full gap-2'):
                for alert in self.alerts:
                    with ui.card().classes('w-full p-4 bg-white/90'):
                        ui.label(f'☀️ Beautiful conditions in {alert.location_name}!') \
                            .classes('text-lg font-semibold text-gray-800')
                        ui.label(f'{alert.temperature_c}°C • {alert.cloud_cover_pct}% cloud cover') \
                            .classes('text-gray-600')
