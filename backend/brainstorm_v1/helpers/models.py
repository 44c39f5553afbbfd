from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

class ResourceRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[int] = Field(default=None, alias="_id")
    fileURI: str
    programCode: Optional[str] = None
    isCommonUnit: Optional[bool] = None
    unitCode: Optional[str] = None
    unitName: Optional[str] = None
    semester: Optional[int] = None
    year: Optional[int] = None
    resourceDate: datetime
    isProfessorEndorsed: Optional[bool] = None
    isExam: Optional[bool] = None
    isNotes: Optional[bool] = None
    unitProfessor: Optional[str] = None

class GenerateResourceResponse(BaseModel):
    message: str
    resource: ResourceRecord

class ErrorResponse(BaseModel):
    error: str
