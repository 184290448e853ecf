"""Domain services.

Pure logic imported by the HTTP routes, kept free of Flask so it can be
tested without an app.
"""
