import httpx
from fastapi import Request

from linkboard.services.metadata import MetadataService


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_metadata_service(request: Request) -> MetadataService:
    return MetadataService(get_http_client(request))
