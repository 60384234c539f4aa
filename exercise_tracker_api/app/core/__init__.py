"""
Core infrastructure: settings, logging, date handling, errors and the
MongoDB record store.
"""
