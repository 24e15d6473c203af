from pydantic import BaseModel


class SwaggerGroupOptions(BaseModel):
    """Swagger options of one documentation group"""

    group: str
    """Group name"""
    title: str | None = None
    """Group document title"""
    description: str | None = None
    """Group document description"""
    version: str | None = None
    """Group document version"""
    url: str | None = None
    """URL path of the group OpenAPI document"""


class SwaggerOptions(BaseModel):
    """Swagger document options

    Populated entirely by binding, no defaults are applied.
    """

    document_title: str
    """Title of the Swagger UI page"""
    groups: list[SwaggerGroupOptions]
    """All group options"""
