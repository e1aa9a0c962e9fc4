"""
HTML Generator

Renders a Resume into a single static HTML document.

Sections are a closed set (SectionKind) rendered in a fixed order through one
dispatch function. Within a section every item goes through the same policy:
- a missing required field skips that item (SKIPPED notice)
- a present field this renderer does not display is left out (IGNORED notice)
- everything else is rendered
Notices are logged and returned with the HTML so callers can inspect them.
Dates are shown as years only, whatever their precision.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from markupsafe import Markup

from rsb.contexts.rendering.logger import (
    _log_error,
    _log_warning,
    log_render_result,
    log_render_start,
)
from rsb.contexts.rendering.template_registry import TemplateRegistry, load_stylesheet
from rsb.contexts.schema.partial_date import PartialDate
from rsb.contexts.schema.resume_data_structure import (
    AwardsItem,
    Basics,
    BasicsLocation,
    CertificatesItem,
    EducationItem,
    InterestsItem,
    LanguagesItem,
    Profile,
    ProjectsItem,
    PublicationsItem,
    ReferencesItem,
    Resume,
    SkillsItem,
    VolunteerItem,
    WorkItem,
    document_key,
)
from rsb.utils.settings import RenderOptions
from rsb.utils.timestamp import today

DEFAULT_TITLE = "Resume"


class SectionKind(Enum):
    """Every section the renderer knows, in page order. Values match Resume attributes."""

    BASICS = "basics"
    EDUCATION = "education"
    WORK = "work"
    PUBLICATIONS = "publications"
    PROJECTS = "projects"
    SKILLS = "skills"
    AWARDS = "awards"
    CERTIFICATES = "certificates"
    VOLUNTEER = "volunteer"
    INTERESTS = "interests"
    LANGUAGES = "languages"
    REFERENCES = "references"


SECTION_ORDER: Tuple[SectionKind, ...] = tuple(SectionKind)


class NoticeKind(Enum):
    SKIPPED = "skipped"
    IGNORED = "ignored"
    EXPERIMENTAL = "experimental"


@dataclass(frozen=True)
class RenderNotice:
    """
    Diagnostic produced while rendering.

    Attributes:
        kind: SKIPPED (item left out), IGNORED (field left out) or EXPERIMENTAL
        section: Section the item belongs to
        location: Item location in the document (e.g. 'education[1]', 'basics.profiles[0]')
        field: Document key of the field that caused the notice (e.g. 'studyType')
        message: Human-readable description (also logged)
    """

    kind: NoticeKind
    section: SectionKind
    location: str
    field: str
    message: str


@dataclass(frozen=True)
class Section:
    """One tagged section: kind plus its backing data (Basics or a list of items)."""

    kind: SectionKind
    payload: Any


@dataclass(frozen=True)
class ItemPolicy:
    """
    Field policy for one item type.

    Attributes:
        required: Attributes an item must have to be rendered (checked in order)
        ignored: Attributes that are never rendered but are reported when present
        skip_is_error: Log skipped items at ERROR instead of WARNING
    """

    required: Tuple[str, ...] = ()
    ignored: Tuple[str, ...] = ()
    skip_is_error: bool = False


ITEM_POLICIES: Dict[SectionKind, ItemPolicy] = {
    SectionKind.EDUCATION: ItemPolicy(
        required=("study_type", "area", "institution"),
        ignored=("url", "start_date", "score", "courses"),
    ),
    SectionKind.WORK: ItemPolicy(
        required=("name", "position"), ignored=("url", "location", "description")
    ),
    SectionKind.PUBLICATIONS: ItemPolicy(required=("name",), ignored=("url", "summary")),
    SectionKind.PROJECTS: ItemPolicy(
        required=("name",), ignored=("entity", "keywords", "roles", "project_type", "url")
    ),
    SectionKind.SKILLS: ItemPolicy(required=("name",), ignored=("level",)),
    SectionKind.AWARDS: ItemPolicy(required=("title",), ignored=("summary",)),
    SectionKind.CERTIFICATES: ItemPolicy(required=("name",), ignored=("url",)),
    SectionKind.VOLUNTEER: ItemPolicy(required=("organization", "position"), ignored=("url",)),
    SectionKind.INTERESTS: ItemPolicy(required=("name",)),
    SectionKind.LANGUAGES: ItemPolicy(required=("language",)),
    SectionKind.REFERENCES: ItemPolicy(required=("reference",)),
}

PROFILE_POLICY = ItemPolicy(required=("url",), ignored=("username",), skip_is_error=True)


@dataclass
class RenderResult:
    """HTML output plus the notices collected while producing it."""

    html: str
    notices: List[RenderNotice] = field(default_factory=list)

    def notices_of(self, kind: NoticeKind) -> List[RenderNotice]:
        return [notice for notice in self.notices if notice.kind is kind]

    @property
    def skipped_locations(self) -> List[str]:
        return [notice.location for notice in self.notices_of(NoticeKind.SKIPPED)]


class NoticeLog:
    """Collects and logs render notices."""

    def __init__(self):
        self.notices: List[RenderNotice] = []

    def add(
        self,
        kind: NoticeKind,
        section: SectionKind,
        location: str,
        key: str,
        message: str,
        log: Callable[[str], None] = _log_warning,
    ) -> None:
        self.notices.append(RenderNotice(kind, section, location, key, message))
        log(message)

    def admit(self, item: Any, section: SectionKind, location: str, policy: ItemPolicy) -> bool:
        """
        Apply an item policy.

        Args:
            item: Item record
            section: Section the item belongs to
            location: Item location for notices
            policy: Required/ignored fields for this item type

        Returns:
            True if the item should be rendered
        """
        for attribute in policy.required:
            if _is_absent(getattr(item, attribute)):
                key = document_key(type(item), attribute)
                self.add(
                    NoticeKind.SKIPPED,
                    section,
                    location,
                    key,
                    f"No {key} in {location} {item}. Skipping render",
                    log=_log_error if policy.skip_is_error else _log_warning,
                )
                return False

        for attribute in policy.ignored:
            if not _is_absent(getattr(item, attribute)):
                key = document_key(type(item), attribute)
                self.add(
                    NoticeKind.IGNORED,
                    section,
                    location,
                    key,
                    f"Ignoring {key} in {location} {item}",
                )
        return True


def _is_absent(value: Any) -> bool:
    return value is None or value == []


def sections_of(resume: Resume) -> List[Section]:
    """Split a resume into tagged sections in page order (empty sections included)."""
    return [Section(kind, getattr(resume, kind.value)) for kind in SECTION_ORDER]


# Date helpers


def year_only(value: Optional[PartialDate]) -> Optional[str]:
    """Year component of a partial date; month and day are never displayed."""
    if value is None:
        return None
    return f"{value.year:04d}"


def format_period(start: Optional[PartialDate], end: Optional[PartialDate]) -> Optional[str]:
    """
    Format a start/end pair as years.

    Returns:
        "2019 - 2021", "2019 - Present", "2021", or None when both are absent
    """
    start_year = year_only(start)
    end_year = year_only(end)

    if start_year and end_year:
        return f"{start_year} - {end_year}"
    if start_year:
        return f"{start_year} - Present"
    return end_year


# Item views: each returns the template context for one admitted item


def _education_view(item: EducationItem) -> Dict[str, Any]:
    return {
        "study_type": item.study_type,
        "area": item.area,
        "institution": item.institution,
        "end_year": year_only(item.end_date),
    }


def _work_view(item: WorkItem) -> Dict[str, Any]:
    return {
        "position": item.position,
        "name": item.name,
        "period": format_period(item.start_date, item.end_date),
        "summary": item.summary,
        "highlights": item.highlights,
    }


def _volunteer_view(item: VolunteerItem) -> Dict[str, Any]:
    return {
        "position": item.position,
        "name": item.organization,
        "period": format_period(item.start_date, item.end_date),
        "summary": item.summary,
        "highlights": item.highlights,
    }


def _publications_view(item: PublicationsItem) -> Dict[str, Any]:
    return {
        "name": item.name,
        "publisher": item.publisher,
        "year": year_only(item.release_date),
    }


def _projects_view(item: ProjectsItem) -> Dict[str, Any]:
    return {
        "name": item.name,
        "period": format_period(item.start_date, item.end_date),
        "description": item.description,
        "highlights": item.highlights,
    }


def _skills_view(item: SkillsItem) -> Dict[str, Any]:
    return {"name": item.name, "keywords": item.keywords}


def _awards_view(item: AwardsItem) -> Dict[str, Any]:
    return {"title": item.title, "awarder": item.awarder, "year": year_only(item.date)}


def _certificates_view(item: CertificatesItem) -> Dict[str, Any]:
    return {"name": item.name, "issuer": item.issuer, "year": year_only(item.date)}


def _interests_view(item: InterestsItem) -> Dict[str, Any]:
    return {"name": item.name, "keywords": item.keywords}


def _languages_view(item: LanguagesItem) -> Dict[str, Any]:
    return {"language": item.language, "fluency": item.fluency}


def _references_view(item: ReferencesItem) -> Dict[str, Any]:
    return {"name": item.name, "reference": item.reference}


ITEM_VIEWS: Dict[SectionKind, Callable[[Any], Dict[str, Any]]] = {
    SectionKind.EDUCATION: _education_view,
    SectionKind.WORK: _work_view,
    SectionKind.PUBLICATIONS: _publications_view,
    SectionKind.PROJECTS: _projects_view,
    SectionKind.SKILLS: _skills_view,
    SectionKind.AWARDS: _awards_view,
    SectionKind.CERTIFICATES: _certificates_view,
    SectionKind.VOLUNTEER: _volunteer_view,
    SectionKind.INTERESTS: _interests_view,
    SectionKind.LANGUAGES: _languages_view,
    SectionKind.REFERENCES: _references_view,
}


def _basics_context(basics: Basics, notices: NoticeLog) -> Dict[str, Any]:
    if basics.location != BasicsLocation():
        notices.add(
            NoticeKind.IGNORED,
            SectionKind.BASICS,
            "basics",
            "location",
            f"Ignoring location in basics {basics.location}",
        )

    if basics.image is not None:
        notices.add(
            NoticeKind.EXPERIMENTAL,
            SectionKind.BASICS,
            "basics",
            "image",
            "embedding an image is experimental. YMMV",
        )

    profiles = []
    for index, profile in enumerate(basics.profiles):
        location = f"basics.profiles[{index}]"
        if notices.admit(profile, SectionKind.BASICS, location, PROFILE_POLICY):
            profiles.append(_profile_view(profile))

    return {"basics": basics, "profiles": profiles}


def _profile_view(profile: Profile) -> Dict[str, Any]:
    return {"url": profile.url, "network": profile.network}


class HTMLGenerator:
    """Converts a Resume into an HTML document."""

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        template_registry: Optional[TemplateRegistry] = None,
    ):
        self.options = options or RenderOptions()
        self.template_registry = template_registry or TemplateRegistry()

    def render_section(self, section: Section, notices: NoticeLog) -> Markup:
        """
        Render one section.

        Args:
            section: Tagged section
            notices: Collector for skip/ignore notices

        Returns:
            Escaped HTML fragment

        Raises:
            ValueError: If no item view is registered for the section kind
        """
        if section.kind is SectionKind.BASICS:
            context = _basics_context(section.payload, notices)
        else:
            if section.kind not in ITEM_VIEWS:
                raise ValueError(f"No renderer registered for section '{section.kind.value}'")
            view = ITEM_VIEWS[section.kind]
            policy = ITEM_POLICIES[section.kind]

            items = []
            for index, item in enumerate(section.payload):
                location = f"{section.kind.value}[{index}]"
                if notices.admit(item, section.kind, location, policy):
                    items.append(view(item))
            context = {"items": items}

        template = self.template_registry.get_template(section.kind.value)
        return Markup(template.render(**context))

    def render(self, resume: Resume) -> RenderResult:
        """
        Render a complete HTML document.

        Args:
            resume: Decoded resume

        Returns:
            RenderResult with the HTML string and collected notices
        """
        start_time = time.time()
        notices = NoticeLog()
        sections = sections_of(resume)
        log_render_start(len(sections))

        rendered = [
            {"name": section.kind.value, "html": self.render_section(section, notices)}
            for section in sections
        ]

        stylesheet = load_stylesheet() if self.options.inline_css else None
        html = self.template_registry.get_page_template().render(
            title_name=resume.basics.name or DEFAULT_TITLE,
            title_date=self.options.title_date or today(),
            stylesheet=stylesheet,
            sections=rendered,
        )

        log_render_result(notices.notices, time.time() - start_time)
        return RenderResult(html=html, notices=notices.notices)


def render_html(resume: Resume, options: Optional[RenderOptions] = None) -> str:
    """
    Render a resume to an HTML string.

    Args:
        resume: Decoded resume
        options: Render options (defaults: inline CSS, today's date in the title)

    Returns:
        HTML document
    """
    return HTMLGenerator(options).render(resume).html
