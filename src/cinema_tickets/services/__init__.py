"""Business logic services used by handlers.

Import services from their own modules; this package stays import-light so
handlers only pull in what they use.
"""
