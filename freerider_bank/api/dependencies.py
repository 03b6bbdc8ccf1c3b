"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from freerider_bank.service import BankService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_bank_service(request: Request) -> BankService:
    """Provide the process-wide ledger service"""
    return request.app.state.bank_service
