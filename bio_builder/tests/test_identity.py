from __future__ import annotations

from bio_builder.profile_parser import identity
from bio_builder.profile_parser.identity import (
    IdentityMatch,
    find_identity,
    is_likely_name,
    is_noise_for_specialty,
    looks_like_credentials,
)


def test_name_shape_accepts_prefixed_surnames() -> None:
    assert is_likely_name("Ellen deBettencourt")
    assert is_likely_name("Jane A. Smith")
    assert is_likely_name("Mary-Kate O'Neil")


def test_name_shape_rejects_chrome_and_prose() -> None:
    assert not is_likely_name("Johns Hopkins Medicine")
    assert not is_likely_name("Accepting New Patients")
    assert not is_likely_name("Patient Ratings")
    assert not is_likely_name("Madonna")
    assert not is_likely_name("One Two Three Four Five Six Seven")
    assert not is_likely_name("Back to search")
    assert not is_likely_name("")


def test_specialty_noise_lines() -> None:
    assert is_noise_for_specialty("")
    assert is_noise_for_specialty("Online Booking Available")
    assert is_noise_for_specialty("4.8 out of 5 stars")
    assert is_noise_for_specialty("Age Groups Seen")
    assert not is_noise_for_specialty("Cardiology")


def test_credential_vocabulary() -> None:
    assert looks_like_credentials("MD, PhD")
    assert looks_like_credentials("MBBS")
    assert looks_like_credentials("Master of Biotechnology")
    assert not looks_like_credentials("Maryland")
    assert not looks_like_credentials("Baltimore")


def test_structured_header_strategy() -> None:
    lines = ["Share:", "Print", "Erin Brown", "Erin Brown, MD", "4.9 out of 5 stars", "Urology"]
    match = identity.match_structured_header(lines)
    assert match == IdentityMatch("Erin Brown", "MD", "Urology", "structured_header")


def test_structured_header_scans_top_lines_without_print_marker() -> None:
    match = identity.match_structured_header(["Erin Brown", "Erin Brown, MD", "Urology"])
    assert match == IdentityMatch("Erin Brown", "MD", "Urology", "structured_header")


def test_structured_header_window_is_limited() -> None:
    lines = ["intro text"] * identity.HEADER_SCAN_LINES + ["Erin Brown", "Urology"]
    assert identity.match_structured_header(lines) is None


def test_surname_owner_needs_degree() -> None:
    assert identity.split_credential_line("Smith, MD, PhD", "Jane A. Smith") == "MD, PhD"
    assert identity.split_credential_line("Smith Hall, 600 N Wolfe St", "Jane A. Smith") == ""
    assert identity.split_credential_line("Jane Smith, RN", "Jane A. Smith") == "RN"
    assert identity.split_credential_line("Baltimore, Maryland", "Jane A. Smith") == ""


def test_building_line_is_not_credentials() -> None:
    lines = ["Print", "Jane A. Smith", "Smith Hall, 600 N Wolfe St", "Cardiology"]
    match = identity.match_structured_header(lines)
    assert match is not None
    assert match.credentials == ""


def test_structured_header_skips_colon_lines_for_specialty() -> None:
    lines = ["Print", "Erin Brown", "Gender: Female", "Urology"]
    match = identity.match_structured_header(lines)
    assert match is not None
    assert match.credentials == ""
    assert match.specialty == "Urology"


def test_comma_credentials_strategy() -> None:
    lines = ["Back to search", "John Smith Jr., MD, PhD", "Cardiology"]
    match = identity.match_comma_credentials(lines)
    assert match == IdentityMatch("John Smith Jr.", "MD, PhD", "Cardiology", "comma_credentials")


def test_comma_credentials_ignores_addresses() -> None:
    assert identity.match_comma_credentials(["Baltimore, Maryland"]) is None


def test_comma_credentials_stops_specialty_scan_at_colon() -> None:
    match = identity.match_comma_credentials(["Ann Lee, DO", "Phone: 555-1212", "Dermatology"])
    assert match is not None
    assert match.specialty == ""


def test_whole_text_strategy() -> None:
    match = identity.match_whole_text(["our team includes Alan Grant, PhD"])
    assert match == IdentityMatch("Alan Grant", "PhD", "", "whole_text")


def test_chain_falls_back_to_name_shape() -> None:
    lines = ["welcome"] * identity.HEADER_SCAN_LINES + ["Ellen deBettencourt", "Pediatrics"]
    result = find_identity(lines)
    assert result == IdentityMatch(name="Ellen deBettencourt", strategy="name_shape")


def test_chain_uses_given_strategies_in_order() -> None:
    lines = ["Print", "Erin Brown", "Urology", "Ann Lee, MD"]
    strategies = [identity.match_comma_credentials, identity.match_structured_header]
    result = find_identity(lines, strategies)
    assert result.name == "Ann Lee"
    assert result.credentials == "MD"


def test_later_strategy_fills_missing_credentials_for_same_name() -> None:
    lines = ["Print", "Erin Brown", "Urology", "Contact", "Erin Brown, MD, FACC"]
    result = find_identity(lines)
    assert result.name == "Erin Brown"
    assert result.specialty == "Urology"
    assert result.credentials == "MD, FACC"
    assert result.strategy == "structured_header"


def test_credentials_recovered_from_name_line() -> None:
    lines = ["Print", "Erin Brown", "Urology", "Erin Brown, RN"]
    assert find_identity(lines).credentials == "RN"


def test_specialty_bullets_are_repaired() -> None:
    lines = ["Print", "Erin Brown", "Spine SurgeryNeurosurgeryNeurosurgical Oncology"]
    result = find_identity(lines)
    assert result.specialty == "Spine Surgery • Neurosurgery • Neurosurgical Oncology"


def test_no_identity_found() -> None:
    assert find_identity(["nothing to see here"]) == IdentityMatch()
