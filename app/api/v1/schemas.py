from pydantic import BaseModel


class FeatureSchema(BaseModel):
    name: str
    label: str
    options: list[str]
    option_labels: list[str]


class FeatureGroupSchema(BaseModel):
    title: str
    icon: str
    description: str
    features: list[str]


class CatalogResponseSchema(BaseModel):
    features: list[FeatureSchema]
    groups: list[FeatureGroupSchema]


class SessionCreatedSchema(BaseModel):
    session_id: str


class SetFeatureRequestSchema(BaseModel):
    value: str


class MissingFieldsSchema(BaseModel):
    message: str
    missing: list[str]
    labels: list[str]
