# app/container.py
from fastapi import Request

from app.domain.ports import StoragePort


def get_gateway(request: Request) -> StoragePort:
    # set once by the lifespan in main.create_app
    return request.app.state.gateway
