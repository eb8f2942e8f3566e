from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeResponse(BaseModel):
    results: str
    image: str  # data:<mime>;base64,<payload>


class UploadErrorResponse(BaseModel):
    error: str


class AnalysisErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str
    status: Union[int, str] = "Unknown"
    status_text: str = Field("Unknown", alias="statusText")
    error_details: Union[List[str], str] = Field(
        "No additional details available", alias="errorDetails"
    )


class DownloadResponse(BaseModel):
    success: bool = True
