"""Dashboard application for the hospital administration front-end.

This package contains the in-memory domain store, the remote spreadsheet
client, the list renderers and the route registrations serving the
dashboard views as JSON.
"""
