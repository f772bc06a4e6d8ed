from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal


ParseQuality = Literal["high", "medium", "low"]
ParseSource = Literal["pdf", "docx", "text"]
Proficiency = Literal["Native", "Fluent", "Advanced", "Intermediate", "Basic"]


class RecordModel(BaseModel):
    """Base for every record model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(RecordModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin_handle: str = ""  # e.g. linkedin.com/in/jdoe
    portfolio_url: str = ""


class ExperienceEntry(RecordModel):
    title: str = ""
    company: str = ""
    start_date: str = ""  # YYYY-MM, or verbatim if unparseable
    end_date: str = ""  # empty when is_current
    is_current: bool = False
    description: str = ""


class EducationEntry(RecordModel):
    degree: str = ""
    institution: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""


class CertificationEntry(RecordModel):
    name: str = ""
    organization: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    no_expiry: bool = True


class LanguageEntry(RecordModel):
    name: str = ""
    proficiency: Proficiency = "Intermediate"


class ResumeRecord(RecordModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    additional: str = ""


class ParseResponse(RecordModel):
    resume: ResumeRecord
    sections: List[str] = Field(default_factory=list, description="Recognized headings in encounter order")
    parse_quality: ParseQuality
    warnings: List[str] = Field(default_factory=list)
    source: ParseSource


class ParseTextRequest(RecordModel):
    text: str = Field(..., description="Text already extracted from the document on the client")


class UploadResponse(RecordModel):
    success: bool = True
    file_id: str
    message: str = "File uploaded successfully"
