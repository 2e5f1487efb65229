from pydantic import BaseModel


class MetadataRead(BaseModel):
    title: str


class ErrorRead(BaseModel):
    error: str
