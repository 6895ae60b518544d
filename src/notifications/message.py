"""Kinds of customer messages the relay sends."""

from enum import Enum


class MessageType(Enum):
    OTP_CHALLENGE = "OtpChallenge"
    COD_ORDER_PLACED = "CodOrderPlaced"
    ORDER_CONFIRMED = "OrderConfirmed"
    ORDER_UPDATED = "OrderUpdated"
    ORDER_CANCELLED = "OrderCancelled"
