# jobboard/schemas/jobs.py
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Wire names follow the frontend's camelCase; Python attributes stay snake_case.


class JobListingIn(BaseModel):
    company_name: Optional[str] = Field(None, alias="companyName")
    add_logo_url: Optional[str] = Field(None, alias="addLogoURL")
    job_position: Optional[str] = Field(None, alias="jobPosition")
    monthly_salary: Optional[str] = Field(None, alias="monthlySalary")
    job_type: Optional[str] = Field(None, alias="jobType")
    remote_onsite: Optional[str] = Field(None, alias="remoteOnsite")
    job_location: Optional[str] = Field(None, alias="jobLocation")
    job_description: Optional[str] = Field(None, alias="jobDescription")
    about_company: Optional[str] = Field(None, alias="aboutCompany")
    # Either ["python", "sql"] or "python, sql"
    skills_required: Optional[Union[List[str], str]] = Field(None, alias="skillsRequired")

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("monthly_salary", mode="before")
    @classmethod
    def _salary_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class JobListingOut(BaseModel):
    id: int
    company_name: str = Field(..., alias="companyName")
    add_logo_url: str = Field(..., alias="addLogoURL")
    job_position: str = Field(..., alias="jobPosition")
    monthly_salary: str = Field(..., alias="monthlySalary")
    job_type: str = Field(..., alias="jobType")
    remote_onsite: str = Field(..., alias="remoteOnsite")
    job_location: str = Field(..., alias="jobLocation")
    job_description: str = Field(..., alias="jobDescription")
    about_company: str = Field(..., alias="aboutCompany")
    skills_required: List[str] = Field(default_factory=list, alias="skillsRequired")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class JobListingsResponse(BaseModel):
    job_listings: List[JobListingOut] = Field(default_factory=list, alias="jobListings")

    model_config = ConfigDict(populate_by_name=True)


class JobListingResponse(BaseModel):
    job_listing: JobListingOut = Field(..., alias="jobListing")

    model_config = ConfigDict(populate_by_name=True)


class MessageOut(BaseModel):
    message: str
    id: Optional[int] = None
