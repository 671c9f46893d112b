"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from users_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` owned by the running application.

    The service (and the store behind it) is created by the lifespan
    handler in ``main`` and kept on ``app.state``.
    """
    return request.app.state.user_service
