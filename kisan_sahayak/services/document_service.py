"""
Document service for offline readiness checks
"""
import logging
from typing import List

from ..models.documents import DocumentReadinessResult

logger = logging.getLogger(__name__)

REQUIRED_DOCUMENTS = (
    'Aadhaar Card',
    'Land Ownership Documents',
    'Income Certificate',
    'Passport Size Photograph',
)

# Checklist offered to farmers when selecting what they hold
COMMON_DOCUMENTS = (
    'Aadhaar Card',
    'PAN Card',
    'Bank Passbook / Bank Account Details',
    'Land Ownership Documents (e.g., 7/12 extract, RoR)',
    'Passport Size Photograph',
    'Voter ID Card',
    'Ration Card',
    'Income Certificate',
    'Caste Certificate (if applicable)',
    'Domicile Certificate (Nivasi Praman Patra)',
    'Mobile Number linked to Aadhaar',
    'Soil Health Card',
)

DOCUMENT_GUIDANCE = (
    'Ensure all names on documents match exactly.',
    'For land records, visit your local Tehsil or Taluk office.',
    "Income certificates can be obtained from the District Magistrate's office or local revenue department.",
)

READY = 'Ready to Apply'
ALMOST_READY = 'Almost Ready'
MISSING_KEY_DOCUMENTS = 'Missing Key Documents'


class DocumentService:
    """Service for checking whether a farmer holds the commonly required documents"""

    def check_document_readiness(self, user_documents: List[str]) -> DocumentReadinessResult:
        """
        Compare held documents with the commonly required set

        Args:
            user_documents: Document names the farmer holds

        Returns:
            DocumentReadinessResult with missing documents and a status
        """
        held = [doc.strip() for doc in user_documents]
        missing = [
            required for required in REQUIRED_DOCUMENTS
            if not any(self._satisfies(doc, required) for doc in held)
        ]

        if not missing:
            status = READY
        elif len(missing) <= 2:
            status = ALMOST_READY
        else:
            status = MISSING_KEY_DOCUMENTS

        logger.info(f"Document readiness: {status} ({len(missing)} missing)")
        return DocumentReadinessResult(
            missing_documents=missing,
            optional_alternatives=list(DOCUMENT_GUIDANCE) if missing else [],
            readiness_status=status
        )

    @staticmethod
    def _satisfies(document: str, required: str) -> bool:
        """Exact name, or the name with a parenthesised qualifier"""
        return document == required or document.startswith(f"{required} (")


# Global document service instance
document_service = DocumentService()
