"""
Front Desk Auth
=================
Staff login with lockout, signed session credentials and per-group
module access.
"""
