"""
Front Desk Hotel Room Engine
==============================
Room inventory and the five-state room status machine.
"""
