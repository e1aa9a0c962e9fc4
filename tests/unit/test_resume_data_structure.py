"""Unit tests for decoding the canonical resume model from plain containers."""

import json

import pytest

from rsb.contexts.schema.exceptions import DecodeError, InvalidCalendarDateError
from rsb.contexts.schema.partial_date import PartialDate
from rsb.contexts.schema.resume_data_structure import (
    Basics,
    EducationItem,
    Profile,
    ProjectsItem,
    Resume,
    document_key,
)


@pytest.mark.unit
def test_empty_document_uses_defaults():
    resume = Resume.from_dict({})

    assert resume == Resume()
    assert resume.basics.name is None
    assert resume.basics.profiles == []
    assert resume.education == []
    assert resume.meta.version is None
    assert resume.schema is None


@pytest.mark.unit
def test_renamed_keys_are_decoded():
    resume = Resume.from_dict(
        {
            "$schema": "https://example.com/schema.json",
            "basics": {"location": {"countryCode": "GB", "postalCode": "N1"}},
            "education": [{"studyType": "Bachelor", "startDate": "2010", "endDate": "2014-06"}],
            "projects": [{"type": "application"}],
            "publications": [{"releaseDate": "2020-02-02"}],
            "meta": {"lastModified": "2024-01-01T00:00:00"},
        }
    )

    assert resume.schema == "https://example.com/schema.json"
    assert resume.basics.location.country_code == "GB"
    assert resume.basics.location.postal_code == "N1"
    assert resume.education[0].study_type == "Bachelor"
    assert resume.education[0].start_date == PartialDate(2010)
    assert resume.education[0].end_date == PartialDate(2014, 6)
    assert resume.projects[0].project_type == "application"
    assert resume.publications[0].release_date == PartialDate(2020, 2, 2)
    assert resume.meta.last_modified == "2024-01-01T00:00:00"


@pytest.mark.unit
def test_unknown_keys_are_ignored():
    resume = Resume.from_dict(
        {
            "x-custom": {"anything": [1, 2, 3]},
            "basics": {"name": "Ada", "nickname": "Countess"},
            "education": [{"institution": "UCL", "gpa": 4}],
        }
    )

    assert resume.basics == Basics(name="Ada")
    assert resume.education == [EducationItem(institution="UCL")]


@pytest.mark.unit
def test_null_is_treated_as_absent():
    resume = Resume.from_dict({"basics": None, "education": [{"institution": None, "courses": None}]})

    assert resume.basics == Basics()
    assert resume.education == [EducationItem()]


@pytest.mark.unit
def test_order_and_duplicates_preserved():
    items = [{"name": "b"}, {"name": "a"}, {"name": "b"}]
    resume = Resume.from_dict({"skills": items})

    assert [skill.name for skill in resume.skills] == ["b", "a", "b"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "data, field_path",
    [
        ({"education": {"institution": "UCL"}}, "education"),
        ({"education": [{"courses": "Algebra"}]}, "education[0].courses"),
        ({"basics": {"name": 42}}, "basics.name"),
        ({"basics": {"profiles": [{"url": "u"}, "github"]}}, "basics.profiles[1]"),
        ({"work": [{"highlights": ["ok", 3]}]}, "work[0].highlights[1]"),
        ({"awards": [{"date": 2020}]}, "awards[0].date"),
        ({"basics": "Ada"}, "basics"),
    ],
)
def test_type_mismatch_raises_decode_error(data, field_path):
    with pytest.raises(DecodeError) as exc_info:
        Resume.from_dict(data)

    assert exc_info.value.field_path == field_path
    assert str(exc_info.value).startswith(field_path)


@pytest.mark.unit
def test_root_must_be_object():
    with pytest.raises(DecodeError, match="expected an object, found array"):
        Resume.from_dict([])


@pytest.mark.unit
def test_invalid_date_carries_field_path():
    with pytest.raises(InvalidCalendarDateError) as exc_info:
        Resume.from_dict({"work": [{}, {"startDate": "2023-02-30"}]})

    assert exc_info.value.field_path == "work[1].startDate"
    assert "work[1].startDate" in str(exc_info.value)


@pytest.mark.unit
def test_to_dict_uses_document_keys_and_omits_absent_values():
    resume = Resume(
        basics=Basics(name="Ada", profiles=[Profile(url="https://github.com/ada")]),
        education=[EducationItem(study_type="BA", end_date=PartialDate(2014, 6))],
        projects=[ProjectsItem(project_type="talk")],
    )

    assert resume.to_dict() == {
        "basics": {"name": "Ada", "profiles": [{"url": "https://github.com/ada"}]},
        "education": [{"studyType": "BA", "endDate": "2014-06"}],
        "projects": [{"type": "talk"}],
    }


@pytest.mark.unit
def test_to_dict_roundtrip():
    data = {
        "$schema": "s",
        "basics": {"name": "Ada", "location": {"city": "London"}},
        "work": [{"name": "Engine", "startDate": "1842-10", "highlights": ["Note G"]}],
        "meta": {"version": "v1"},
    }

    assert Resume.from_dict(data).to_dict() == data


@pytest.mark.unit
def test_str_is_json():
    resume = Resume(basics=Basics(name="Ada"))

    assert json.loads(str(resume)) == {"basics": {"name": "Ada"}}


@pytest.mark.unit
def test_document_key():
    assert document_key(EducationItem, "study_type") == "studyType"
    assert document_key(EducationItem, "area") == "area"
    assert document_key(Resume, "schema") == "$schema"

    with pytest.raises(AttributeError):
        document_key(EducationItem, "missing")


@pytest.mark.unit
def test_runaway_recursion_is_decode_error(monkeypatch):
    def recurse(record_type, data, path):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr("rsb.contexts.schema.resume_data_structure._decode_record", recurse)

    with pytest.raises(DecodeError, match="input nested too deeply"):
        Resume.from_dict({"basics": {}})
