"""Shared response bodies"""
from .base import CamelModel


class MessageResponse(CamelModel):
    message: str


class ErrorResponse(CamelModel):
    error: str
