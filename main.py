from blue_sky_alerts.app import main

if __name__ in {"__main__", "__mp_main__"}:
    main()
