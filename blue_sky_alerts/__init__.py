"""UK Blue Sky Alerts dashboard"""

__version__ = "0.1.0"
