from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    query: str = Field(..., description="Dictated text to add to the document")


class QueryResponse(BaseModel):
    status: str = Field(..., description="Always 'created' on success")
    query: str = Field(..., description="The query that was added")
