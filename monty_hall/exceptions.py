"""
Exceptions raised by the Monty Hall simulation
"""


class MontyHallError(Exception):
    """Base class for simulation errors"""


class InvalidArgumentError(MontyHallError, ValueError):
    """A public operation received an argument outside its valid range"""
