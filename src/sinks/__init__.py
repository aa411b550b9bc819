"""Output sinks for decoded payloads.

This package holds the local directory sink and the Google Sheets sink.
"""
