"""Shared route dependencies."""

from fastapi import Request

from pipeline_poc.core.assembler import ResponseAssembler


async def get_assembler(request: Request) -> ResponseAssembler:
    """Dependency to get the response assembler bound to the application."""
    return request.app.state.assembler
