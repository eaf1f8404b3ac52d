from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from unilinker.links import DeepLinkResult
from unilinker.registry import University


class UniversityOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    short_name: str = Field(alias="shortName")
    location: str

    @classmethod
    def from_university(cls, university: University) -> UniversityOut:
        return cls(name=university.name, short_name=university.short_name, location=university.location)


class GeneratedLink(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    university: UniversityOut
    deep_link: str = Field(alias="deepLink")
    web_link: str = Field(alias="webLink")

    @classmethod
    def from_result(cls, result: DeepLinkResult) -> GeneratedLink:
        return cls(
            university=UniversityOut.from_university(result.university),
            deep_link=result.deep_link,
            web_link=result.web_link,
        )


class HealthStatus(BaseModel):
    status: str
    message: str


class ApiError(BaseModel):
    error: str
