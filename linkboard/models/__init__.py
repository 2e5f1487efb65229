from linkboard.models.base import Base
from linkboard.models.stored_value import StoredValue

__all__ = ["Base", "StoredValue"]
