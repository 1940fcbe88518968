"""
Upload-completion event schema.

Validates message bodies delivered through SQS when a document record
has been created and its bytes uploaded. Only the document ID is
needed; everything else is read from the record.

Dependencies: pydantic
System role: Data validation and contract definition for the queue trigger
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocumentCreatedEvent(BaseModel):
    """SQS message body for document processing events."""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"document_id": "doc_8f2a41"}},
    )

    document_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("document_id", "documentId"),
        description="ID of the document record to process",
    )
    force: bool = Field(
        default=False,
        description="Reprocess even if another run appears to hold the document",
    )
