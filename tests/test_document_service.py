import pytest

from kisan_sahayak.services.document_service import DocumentService, REQUIRED_DOCUMENTS

ALL_REQUIRED = ["Aadhaar Card", "Land Ownership Documents", "Income Certificate", "Passport Size Photograph"]


@pytest.fixture
def service():
    return DocumentService()


def test_no_documents_means_missing_key_documents(service):
    result = service.check_document_readiness([])

    assert result.readiness_status == "Missing Key Documents"
    assert result.missing_documents == list(REQUIRED_DOCUMENTS)
    assert len(result.optional_alternatives) == 3


def test_all_documents_ready(service):
    result = service.check_document_readiness(ALL_REQUIRED)

    assert result.readiness_status == "Ready to Apply"
    assert result.missing_documents == []
    assert result.optional_alternatives == []


@pytest.mark.parametrize(
    "held, status",
    [
        (ALL_REQUIRED[:3], "Almost Ready"),
        (ALL_REQUIRED[:2], "Almost Ready"),
        (ALL_REQUIRED[:1], "Missing Key Documents"),
    ],
)
def test_status_depends_on_missing_count(service, held, status):
    assert service.check_document_readiness(held).readiness_status == status


def test_checklist_label_counts_for_land_records(service):
    held = [
        "Aadhaar Card",
        "Land Ownership Documents (e.g., 7/12 extract, RoR)",
        "Income Certificate",
        "Passport Size Photograph",
    ]

    assert service.check_document_readiness(held).readiness_status == "Ready to Apply"


def test_unrelated_documents_do_not_count(service):
    result = service.check_document_readiness(["PAN Card", "Voter ID Card", " Aadhaar Card "])

    assert result.missing_documents == ["Land Ownership Documents", "Income Certificate", "Passport Size Photograph"]
    assert result.readiness_status == "Missing Key Documents"
