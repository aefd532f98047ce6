"""Elevator car, internal and external dispatchers, and controller."""