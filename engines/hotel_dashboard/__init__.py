"""
Front Desk Hotel Dashboard
============================
Read-only room grid with status counts and overdue alerts, plus the
push channel that rebroadcasts it after each committed mutation.
"""
