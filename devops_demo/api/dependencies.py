"""
Request dependencies exposing per-application state to handlers.

``create_app`` stores the settings, clock and boot record on
``app.state``; handlers receive them through ``Depends`` so that
separately built applications never share state.
"""

from fastapi import Request

from devops_demo.clock import BootRecord, Clock
from devops_demo.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_boot_record(request: Request) -> BootRecord:
    return request.app.state.boot_record
