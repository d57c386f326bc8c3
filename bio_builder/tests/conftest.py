from __future__ import annotations

import pytest

SAMPLE_PAGE = """Johns Hopkins Medicine
Back to search
Share:
Print
Erin Brown
Erin Brown, MD
Spine SurgeryNeurosurgeryNeurosurgical Oncology
Accepting New Patients
4.9 out of 5 stars
Johns Hopkins Affiliations: Johns Hopkins Hospital
Locations
Languages
BengaliEnglish
Gender
Female
Professional Titles
• Assistant Professor of Neurosurgery
• Director, Spine Program
Primary Academic Title
Assistant Professor of Neurosurgery
Background
Dr. Brown is a neurosurgeon
specializing in   spine surgery.
show more
Education
Johns Hopkins University School of Medicine
MD
Duke University
Residency
Board Certifications
American Board of Neurological Surgery
Neurological Surgery
Memberships
American Association of Neurological Surgeons
Locations
1 Johns Hopkins Hospital
1800 Orleans St, Baltimore, MD 21287
Phone: 410-955-5000 Fax: 410-955-5001
Get Directions
2 Green Spring Station
Phone: 410-583-2600
Maplibre | © OpenStreetMap
Ratings & Reviews
Read all reviews
"""


@pytest.fixture()
def sample_page() -> str:
    return SAMPLE_PAGE.replace("\n", "\r\n")
