"""Utilities Package"""
from app.utils.error_handler import handle_db_exception
from app.utils.flash import flash, get_flashed_messages
from app.utils.error_decorators import handle_route_errors

__all__ = [
    "handle_db_exception",
    "flash",
    "get_flashed_messages",
    "handle_route_errors",
]
