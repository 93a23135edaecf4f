"""
Objects API Pydantic models
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectPayload(BaseModel):
    """Request body for POST /objects and PUT /objects/{id}"""
    name: str
    data: Optional[Dict[str, Any]] = None


class ApiObject(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str
    data: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class DeleteConfirmation(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str
