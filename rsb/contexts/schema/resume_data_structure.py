"""
Resume Document Structure

Canonical in-memory model of a JSON Resume style document. Every input format
(JSON5, YAML, RON, Jsonnet) decodes into these classes, and the rendering
context reads only from them.

Nothing is required: scalars default to None, collections to empty lists, so
partial hand-written documents always load. Unknown keys are ignored.
"""

import json
import typing
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, List, Optional

from rsb.contexts.schema.exceptions import DateError, DecodeError
from rsb.contexts.schema.partial_date import PartialDate


def _key(name: str) -> Dict[str, str]:
    """Field metadata for attributes stored under a different document key."""
    return {"key": name}


class _Record:
    """Shared decoding/encoding behaviour for all resume records."""

    @classmethod
    def from_dict(cls, data: Any, field_path: str = "") -> Any:
        """
        Build a record from decoded JSON/YAML/RON data.

        Args:
            data: Mapping of document keys to values
            field_path: Location of this record in the document (for error messages)

        Returns:
            Instance of cls

        Raises:
            DecodeError: If data (or any nested value) has the wrong shape
            DateError: If a date field holds an invalid partial date
        """
        try:
            return _decode_record(cls, data, field_path)
        except RecursionError as e:
            raise DecodeError("input nested too deeply", field_path or None) from e

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_dict: document keys, absent values and empty lists omitted."""
        result = {}
        for f in fields(self):
            value = _encode_value(getattr(self, f.name))
            if value is None or value == [] or value == {}:
                continue
            result[document_key(type(self), f.name)] = value
        return result

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


@dataclass
class Profile(_Record):
    """Social network profile listed under basics.profiles."""

    network: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None


@dataclass
class BasicsLocation(_Record):
    address: Optional[str] = None
    postal_code: Optional[str] = field(default=None, metadata=_key("postalCode"))
    city: Optional[str] = None
    country_code: Optional[str] = field(default=None, metadata=_key("countryCode"))
    region: Optional[str] = None


@dataclass
class Basics(_Record):
    """Name, contact details and profiles of the resume owner."""

    name: Optional[str] = None
    label: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None
    location: BasicsLocation = field(default_factory=BasicsLocation)
    profiles: List[Profile] = field(default_factory=list)


@dataclass
class WorkItem(_Record):
    name: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[PartialDate] = field(default=None, metadata=_key("startDate"))
    end_date: Optional[PartialDate] = field(default=None, metadata=_key("endDate"))
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)


@dataclass
class VolunteerItem(_Record):
    organization: Optional[str] = None
    position: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[PartialDate] = field(default=None, metadata=_key("startDate"))
    end_date: Optional[PartialDate] = field(default=None, metadata=_key("endDate"))
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)


@dataclass
class EducationItem(_Record):
    institution: Optional[str] = None
    url: Optional[str] = None
    area: Optional[str] = None
    study_type: Optional[str] = field(default=None, metadata=_key("studyType"))
    start_date: Optional[PartialDate] = field(default=None, metadata=_key("startDate"))
    end_date: Optional[PartialDate] = field(default=None, metadata=_key("endDate"))
    score: Optional[str] = None
    courses: List[str] = field(default_factory=list)


@dataclass
class AwardsItem(_Record):
    title: Optional[str] = None
    date: Optional[PartialDate] = None
    awarder: Optional[str] = None
    summary: Optional[str] = None


@dataclass
class CertificatesItem(_Record):
    name: Optional[str] = None
    date: Optional[PartialDate] = None
    issuer: Optional[str] = None
    url: Optional[str] = None


@dataclass
class PublicationsItem(_Record):
    name: Optional[str] = None
    publisher: Optional[str] = None
    release_date: Optional[PartialDate] = field(default=None, metadata=_key("releaseDate"))
    url: Optional[str] = None
    summary: Optional[str] = None


@dataclass
class SkillsItem(_Record):
    name: Optional[str] = None
    level: Optional[str] = None
    keywords: List[str] = field(default_factory=list)


@dataclass
class LanguagesItem(_Record):
    language: Optional[str] = None
    fluency: Optional[str] = None


@dataclass
class InterestsItem(_Record):
    name: Optional[str] = None
    keywords: List[str] = field(default_factory=list)


@dataclass
class ReferencesItem(_Record):
    name: Optional[str] = None
    reference: Optional[str] = None


@dataclass
class ProjectsItem(_Record):
    name: Optional[str] = None
    description: Optional[str] = None
    highlights: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    start_date: Optional[PartialDate] = field(default=None, metadata=_key("startDate"))
    end_date: Optional[PartialDate] = field(default=None, metadata=_key("endDate"))
    url: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    entity: Optional[str] = None
    project_type: Optional[str] = field(default=None, metadata=_key("type"))


@dataclass
class Meta(_Record):
    """Schema version and tooling configuration of the document itself."""

    canonical: Optional[str] = None
    version: Optional[str] = None
    last_modified: Optional[str] = field(default=None, metadata=_key("lastModified"))


@dataclass
class Resume(_Record):
    """
    Root of the canonical resume document.

    Attributes:
        schema: Link to the schema the document claims to follow ('$schema')
        basics: Owner details (always present, possibly empty)
        meta: Document metadata (always present, possibly empty)
        awards ... work: Ordered item lists, duplicates allowed
    """

    schema: Optional[str] = field(default=None, metadata=_key("$schema"))
    basics: Basics = field(default_factory=Basics)
    work: List[WorkItem] = field(default_factory=list)
    volunteer: List[VolunteerItem] = field(default_factory=list)
    education: List[EducationItem] = field(default_factory=list)
    awards: List[AwardsItem] = field(default_factory=list)
    certificates: List[CertificatesItem] = field(default_factory=list)
    publications: List[PublicationsItem] = field(default_factory=list)
    skills: List[SkillsItem] = field(default_factory=list)
    languages: List[LanguagesItem] = field(default_factory=list)
    interests: List[InterestsItem] = field(default_factory=list)
    references: List[ReferencesItem] = field(default_factory=list)
    projects: List[ProjectsItem] = field(default_factory=list)
    meta: Meta = field(default_factory=Meta)


def document_key(record_type: type, attribute: str) -> str:
    """
    Get the document key an attribute is stored under.

    Args:
        record_type: Record class (e.g. EducationItem)
        attribute: Python attribute name (e.g. 'study_type')

    Returns:
        Key used in input documents (e.g. 'studyType')
    """
    for f in fields(record_type):
        if f.name == attribute:
            return f.metadata.get("key", f.name)
    raise AttributeError(f"{record_type.__name__} has no field '{attribute}'")


# Decoding


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _decode_record(record_type: type, data: Any, path: str) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"expected an object, found {_type_name(data)}", path or None)

    hints = typing.get_type_hints(record_type)
    values = {}
    for f in fields(record_type):
        key = f.metadata.get("key", f.name)
        # Explicit null is the same as leaving the key out
        if data.get(key) is None:
            continue
        values[f.name] = _decode_value(hints[f.name], data[key], _join(path, key))

    return record_type(**values)


def _decode_value(hint: Any, value: Any, path: str) -> Any:
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is typing.Union:
        # Optional[X]; None was already filtered out by the caller
        inner = [arg for arg in args if arg is not type(None)]
        return _decode_value(inner[0], value, path)

    if origin in (list, List):
        if not isinstance(value, list):
            raise DecodeError(f"expected an array, found {_type_name(value)}", path)
        (item_hint,) = args
        return [_decode_value(item_hint, item, f"{path}[{index}]") for index, item in enumerate(value)]

    if hint is str:
        if not isinstance(value, str):
            raise DecodeError(f"expected a string, found {_type_name(value)}", path)
        return value

    if hint is PartialDate:
        if not isinstance(value, str):
            raise DecodeError(f"expected a date string, found {_type_name(value)}", path)
        try:
            return PartialDate.parse(value)
        except DateError as e:
            e.field_path = path
            raise

    if is_dataclass(hint):
        return _decode_record(hint, value, path)

    raise TypeError(f"Unsupported field type {hint!r} at {path}")


def _encode_value(value: Any) -> Any:
    if isinstance(value, _Record):
        return value.to_dict()
    if isinstance(value, PartialDate):
        return value.serialize()
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value
