"""Parking lot: slots, vehicles, tickets, payments, dashboard and attendants."""