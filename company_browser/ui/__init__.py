"""
UI adapters for the company browser.

Currently provides a Dash-based web UI via create_dash_app().
The core package has no Dash dependency; everything Dash-specific lives here.
"""
