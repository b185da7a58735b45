from fastapi import Request

from ..services import Services


def get_services(request: Request) -> Services:
    """Dependency returning the services container built by create_app()"""
    return request.app.state.services
