"""Unit tests for resume content normalization."""

import pytest

from folio.contexts.content.exceptions import InvalidResumeStructureError
from folio.contexts.content.resume_data_structure import (
    BulletItem,
    ContactInfo,
    ExperienceEntry,
    ResumeContent,
    SkillsData,
)
from folio.contexts.content.rich_text import extract_plain_text


@pytest.mark.unit
def test_from_dict_none_and_empty():
    empty = ResumeContent.from_dict(None)
    assert empty.experience == []
    assert empty.contact.display_name == ""

    assert ResumeContent.from_dict({}) == empty


@pytest.mark.unit
@pytest.mark.parametrize("data", [[], "resume", 3])
def test_from_dict_rejects_non_mapping(data):
    with pytest.raises(InvalidResumeStructureError):
        ResumeContent.from_dict(data)


@pytest.mark.unit
def test_missing_lists_and_ids(full_resume):
    content = ResumeContent.from_dict(full_resume)

    assert [e.id for e in content.experience] == ["exp-babbage", "exp-1", "exp-2"]
    assert content.education[0].id == "edu-0"
    assert content.publications[0].id == "pub-0"
    assert content.experience[1].current is True
    assert content.experience[2].enabled is False


@pytest.mark.unit
def test_bullet_shapes():
    string_bullet = BulletItem.from_value("Plain string", "x-bullet-0")
    assert string_bullet.id == "x-bullet-0"
    assert extract_plain_text(string_bullet.content).strip() == "Plain string"

    doc = {"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Doc"}]}]}
    assert BulletItem.from_value(doc, "d").content is doc

    record = BulletItem.from_value({"id": "b9", "enabled": False, "content": "Record"}, "fallback")
    assert (record.id, record.enabled) == ("b9", False)
    assert extract_plain_text(record.content).strip() == "Record"

    junk = BulletItem.from_value(42, "junk")
    assert extract_plain_text(junk.content) == ""


@pytest.mark.unit
def test_experience_bullet_ids_are_derived_from_entry():
    entry = ExperienceEntry.from_dict({"bullets": ["a", {"content": "b"}]}, 3)
    assert entry.id == "exp-3"
    assert [b.id for b in entry.bullets] == ["exp-3-bullet-0", "exp-3-bullet-1"]


@pytest.mark.unit
def test_enabled_flags_only_false_disables():
    entry = ExperienceEntry.from_dict(
        {"enabled": None, "companyEnabled": 0, "positionEnabled": False}, 0
    )
    assert entry.enabled is True
    assert entry.company_enabled is True
    assert entry.position_enabled is False


@pytest.mark.unit
def test_contact_display_name_fallback():
    assert ContactInfo(first_name="Ada", last_name="Lovelace").display_name == "Ada Lovelace"
    assert ContactInfo(name="Countess", first_name="Ada").display_name == "Countess"
    assert ContactInfo(last_name="Lovelace").display_name == "Lovelace"


@pytest.mark.unit
def test_skills_legacy_and_record_shapes():
    skills = SkillsData.from_dict(
        {
            "technical": [{"id": "t1", "name": "Python"}, {"name": "Go", "enabled": False}],
            "soft": [],
            "softLegacy": ["Mentoring"],
            "other": ["Chess"],
        }
    )
    assert [(s.id, s.name, s.enabled) for s in skills.technical] == [
        ("t1", "Python", True),
        ("skill-technical-1", "Go", False),
    ]
    assert [s.name for s in skills.soft] == ["Mentoring"]
    assert skills.other[0].id == "skill-other-0"


@pytest.mark.unit
def test_project_technologies_and_numbers_as_text():
    content = ResumeContent.from_dict(
        {
            "projects": [{"name": "Engine", "technologies": ["Brass", None, "Steam"]}],
            "education": [{"institution": "School", "gpa": 3.9}],
        }
    )
    assert content.projects[0].technologies == ["Brass", "Steam"]
    assert content.education[0].gpa == "3.9"


@pytest.mark.unit
def test_non_mapping_records_are_ignored():
    content = ResumeContent.from_dict({"experience": ["not a record", {"company": "Real"}]})
    assert len(content.experience) == 1
    assert content.experience[0].company == "Real"
