from __future__ import annotations

import pytest

from bio_builder.profile_parser import parse_profile_text
from bio_builder.profile_parser.locations import LocationRecord
from bio_builder.profile_parser.parser import PhysicianRecord, bound_input, resolve_max_input_chars


def test_parse_full_profile(sample_page: str) -> None:
    record = parse_profile_text(sample_page)
    assert record.name == "Erin Brown"
    assert record.credentials == "MD"
    assert record.specialty == "Spine Surgery • Neurosurgery • Neurosurgical Oncology"
    assert record.affiliations == "Johns Hopkins Hospital"
    assert record.languages == "Bengali, English"
    assert record.gender == "Female"
    assert record.titles == (
        "Assistant Professor of Neurosurgery",
        "Director, Spine Program",
    )
    assert record.academic_title == "Assistant Professor of Neurosurgery"
    assert record.background == "Dr. Brown is a neurosurgeon specializing in spine surgery."
    assert record.education == (
        "Johns Hopkins University School of Medicine — MD",
        "Duke University — Residency",
    )
    assert record.certifications == (
        "American Board of Neurological Surgery — Neurological Surgery",
    )
    assert record.memberships == ("American Association of Neurological Surgeons",)
    assert record.locations == (
        LocationRecord(
            name="Johns Hopkins Hospital",
            address="1800 Orleans St, Baltimore, MD 21287",
            phone="410-955-5000",
            fax="410-955-5001",
        ),
        LocationRecord(name="Green Spring Station", phone="410-583-2600"),
    )


def test_parse_is_idempotent(sample_page: str) -> None:
    first = parse_profile_text(sample_page)
    second = parse_profile_text(sample_page)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_header_example_with_surname_credentials() -> None:
    record = parse_profile_text("Print\nJane A. Smith\nSmith, MD, PhD\nCardiology\n")
    assert record.name == "Jane A. Smith"
    assert record.credentials == "MD, PhD"
    assert record.specialty == "Cardiology"


def test_header_without_print_marker_keeps_full_name() -> None:
    record = parse_profile_text("Jane A. Smith\nSmith, MD, PhD\nCardiology\n")
    assert record.name == "Jane A. Smith"
    assert record.credentials == "MD, PhD"
    assert record.specialty == "Cardiology"

    record = parse_profile_text("Erin Brown\nBrown, MD\nUrology\n")
    assert record.name == "Erin Brown"
    assert record.credentials == "MD"
    assert record.specialty == "Urology"


def test_record_lists_cannot_be_mutated(sample_page: str) -> None:
    record = parse_profile_text(sample_page)
    assert isinstance(record.titles, tuple)
    assert isinstance(record.locations, tuple)
    with pytest.raises(AttributeError):
        record.education.append("Extra — MD")  # type: ignore[attr-defined]
    assert record.to_dict()["memberships"] == ["American Association of Neurological Surgeons"]


def test_unstructured_input_degrades_to_empty_fields() -> None:
    record = parse_profile_text("lorem ipsum dolor sit amet\n12345\n")
    assert record == PhysicianRecord()
    data = record.to_dict()
    assert data["locations"] == []
    assert data["education"] == []
    assert data["name"] == ""


def test_single_line_paste_is_segmented() -> None:
    record = parse_profile_text("Dr. Who Languages: EnglishFrench Gender: Male")
    assert record.languages == "English, French"
    assert record.gender == "Male"


def test_background_falls_back_to_about() -> None:
    record = parse_profile_text("About\nCares for children.\nEducation\nYale\nMD")
    assert record.background == "Cares for children."
    assert record.education == ("Yale — MD",)


def test_academic_title_fallback_uses_professor_line() -> None:
    record = parse_profile_text("Jane Smith\nAssociate Professor of Medicine\nGender\nFemale")
    assert record.academic_title == "Associate Professor of Medicine"


def test_affiliations_on_following_line() -> None:
    record = parse_profile_text("Johns Hopkins Affiliations\nSibley Memorial Hospital\n")
    assert record.affiliations == "Sibley Memorial Hospital"


def test_languages_inline_value_when_block_empty() -> None:
    record = parse_profile_text("Languages: Spanish / english\nGender\nMale")
    assert record.languages == "Spanish, English"


def test_to_dict_serializes_locations(sample_page: str) -> None:
    data = parse_profile_text(sample_page).to_dict()
    assert data["locations"][1] == {
        "name": "Green Spring Station",
        "address": "",
        "phone": "410-583-2600",
        "fax": "",
    }
    assert data["academic_title"] == "Assistant Professor of Neurosurgery"


def test_bound_input_respects_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIO_MAX_INPUT_CHARS", "5")
    assert resolve_max_input_chars(None) == 5
    assert bound_input("abcdefgh") == "abcde"
    assert bound_input("abcdefgh", 0) == "abcdefgh"
    monkeypatch.setenv("BIO_MAX_INPUT_CHARS", "lots")
    assert resolve_max_input_chars(None) == 200_000
