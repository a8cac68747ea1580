from pydantic import BaseModel, ConfigDict, Field


class CountryRequest(BaseModel):
    country: str = Field(default="", description="Exact, case-sensitive country name")


class SortRequest(BaseModel):
    type: str | None = Field(default=None, description="Sort field, e.g. deaths or todayCases")


class CompareRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    country_one: str = Field(default="", alias="countryOne")
    country_two: str = Field(default="", alias="countryTwo")
