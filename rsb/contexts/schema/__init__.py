"""
Schema Context

Responsibilities:
- Defines the canonical resume document model (JSON Resume layout)
- Parses and validates partial dates (YYYY, YYYY-MM, YYYY-MM-DD)
- Selects a decoder from the input extension and decodes JSON5, YAML, RON and Jsonnet

Owns: Resume model, PartialDate, format dispatch, load-time errors
Never: Decides how anything is displayed
"""

from rsb.contexts.schema.exceptions import (
    DateError,
    DecodeError,
    EvaluationError,
    GrammarMismatchError,
    InvalidCalendarDateError,
    ResumeError,
    ResumeIOError,
    UnknownFormatError,
)
from rsb.contexts.schema.formats import (
    DataType,
    FileType,
    file_type_for,
    from_buffer,
    from_file,
)
from rsb.contexts.schema.partial_date import DatePrecision, PartialDate
from rsb.contexts.schema.resume_data_structure import (
    AwardsItem,
    Basics,
    BasicsLocation,
    CertificatesItem,
    EducationItem,
    InterestsItem,
    LanguagesItem,
    Meta,
    Profile,
    ProjectsItem,
    PublicationsItem,
    ReferencesItem,
    Resume,
    SkillsItem,
    VolunteerItem,
    WorkItem,
)

__all__ = [
    # Dispatch
    "DataType",
    "FileType",
    "file_type_for",
    "from_buffer",
    "from_file",
    # Dates
    "DatePrecision",
    "PartialDate",
    # Model
    "Resume",
    "Basics",
    "BasicsLocation",
    "Profile",
    "WorkItem",
    "VolunteerItem",
    "EducationItem",
    "AwardsItem",
    "CertificatesItem",
    "PublicationsItem",
    "SkillsItem",
    "LanguagesItem",
    "InterestsItem",
    "ReferencesItem",
    "ProjectsItem",
    "Meta",
    # Errors
    "ResumeError",
    "ResumeIOError",
    "UnknownFormatError",
    "DecodeError",
    "DateError",
    "GrammarMismatchError",
    "InvalidCalendarDateError",
    "EvaluationError",
]
