"""
Front Desk Hotel Booking Engine
=================================
Reservation lifecycle: create, pay, check-in, check-out, receipt.
Drives room status changes through the room engine.
"""
