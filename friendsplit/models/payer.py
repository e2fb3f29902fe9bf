"""Payer enum"""
import enum


class Payer(str, enum.Enum):
    """Who is paying the bill"""
    USER = "USER"
    FRIEND = "FRIEND"
