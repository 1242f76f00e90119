# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Hosted store settings
_STORE_URL = os.getenv("STORE_URL", "http://localhost:54321")
_STORE_ANON_KEY = os.getenv("STORE_ANON_KEY", "")
_STORE_ACCESS_TOKEN = os.getenv("STORE_ACCESS_TOKEN", None)
_STORE_TIMEOUT = int(os.getenv("STORE_TIMEOUT", "30"))

# Data provider: "http" (hosted store) or "memory" (offline/demo)
_DATA_PROVIDER = os.getenv("DATA_PROVIDER", "memory").lower()

# Signed-in user (supplied by the hosted auth service)
_USER_ID = os.getenv("IDECIDE_USER_ID", None)

# Logging
_LOG_LEVEL = os.getenv("IDECIDE_LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "iDecide"
    APP_TITLE: str = "Estate Planning & NDIS Plan Management"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "iDecide"

    # Data store
    DATA_PROVIDER: str = _DATA_PROVIDER
    STORE_URL: str = _STORE_URL
    STORE_ANON_KEY: str = _STORE_ANON_KEY
    STORE_ACCESS_TOKEN: Optional[str] = _STORE_ACCESS_TOKEN
    STORE_TIMEOUT: int = _STORE_TIMEOUT

    # Session
    USER_ID: Optional[str] = _USER_ID

    # Tables
    LEGAL_DOCUMENTS_TABLE: str = "legal_documents"
    INSURANCE_POLICIES_TABLE: str = "insurance_policies"
    SERVICE_AGREEMENTS_TABLE: str = "ndis_service_agreements"
    SERVICE_PROVIDERS_TABLE: str = "ndis_service_providers"
    TRANSACTIONS_TABLE: str = "ndis_transactions"

    # Blob storage
    LEGAL_DOCUMENTS_BUCKET: str = "legal_documents"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    EXPORTS_DIR: Path = DATA_DIR / "exports"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 720
    SIDEBAR_WIDTH: int = 220
    FONT_SIZE: int = 10
    FONT_SIZE_SMALL: int = 9

    PRIMARY_COLOR: str = "#2563EB"
    SIDEBAR_COLOR: str = "#1E3A8A"
    ACCENT_COLOR: str = "#93C5FD"
    TEXT_LIGHT: str = "#6B7280"
    BORDER_COLOR: str = "#E5E7EB"
    ERROR_COLOR: str = "#DC2626"


# Page identifiers
class Pages:
    LEGAL_DOCUMENTS = "legal_documents"
    SERVICE_AGREEMENTS = "service_agreements"
    PARTICIPANTS = "participants"
    SERVICE_PROVIDERS = "service_providers"
    BUDGET = "budget"


# Controlled vocabularies
class Vocabularies:
    # Value, display name
    MARITAL_STATUS = [
        ("single", "Single"),
        ("married", "Married"),
        ("divorced", "Divorced"),
        ("widowed", "Widowed"),
    ]

    TRUST_TYPES = [
        ("revocable", "Revocable Living Trust"),
        ("irrevocable", "Irrevocable Trust"),
    ]

    TRUSTEE_TYPES = [
        ("primary", "Primary"),
        ("successor", "Successor"),
    ]

    RESIDUAL_DISTRIBUTION = [
        ("equal", "Equally among beneficiaries"),
        ("percentage", "By percentage"),
        ("charity", "To charity"),
    ]

    POA_TYPES = [
        ("financial", "Financial"),
        ("medical", "Medical"),
    ]

    FINANCIAL_POWERS = [
        "Real estate transactions",
        "Banking and financial transactions",
        "Business operations",
        "Insurance transactions",
        "Tax matters",
        "Investment decisions",
        "Retirement benefit transactions",
        "Legal claims and litigation",
        "Personal property transactions",
        "Government benefits",
    ]

    MEDICAL_POWERS = [
        "Medical treatment decisions",
        "Hospital/facility admission",
        "Medication decisions",
        "Surgical procedures",
        "End-of-life decisions",
        "Access to medical records",
        "Choice of healthcare providers",
        "Organ/tissue donation",
        "Mental health treatment",
        "Pain management decisions",
    ]

    DIRECTIVE_TYPES = [
        ("living_will", "Living Will"),
        ("healthcare_directive", "Healthcare Directive"),
    ]

    LIFE_SUSTAINING = [
        ("all", "Use all available life-sustaining treatments"),
        ("limited", "Use life-sustaining treatments with limitations"),
        ("comfort", "Provide comfort care only"),
        ("none", "Do not use life-sustaining treatments"),
    ]

    ARTIFICIAL_NUTRITION = [
        ("yes", "Yes, I want artificial nutrition and hydration"),
        ("trial", "Yes, but only for a trial period"),
        ("no", "No, I do not want artificial nutrition and hydration"),
    ]

    ORGAN_DONATION = [
        ("all", "I want to donate all organs and tissues"),
        ("specific", "I want to donate specific organs/tissues"),
        ("research", "I want to donate for research only"),
        ("none", "I do not want to donate organs or tissues"),
    ]

    TERMINAL_PREFERENCES = [
        "Cardiopulmonary resuscitation (CPR)",
        "Mechanical ventilation",
        "Tube feeding",
        "Dialysis",
        "Antibiotics",
        "Comfort care only",
    ]

    ASSET_TYPES = [
        ("real_estate", "Real Estate"),
        ("bank_account", "Bank Account"),
        ("investment", "Investment Account"),
        ("business", "Business Interest"),
        ("personal_property", "Personal Property"),
        ("other", "Other"),
    ]

    POA_EFFECTIVE = [
        ("immediate", "Immediately upon signing"),
        ("incapacity", "Upon incapacity (Springing POA)"),
        ("date", "On specific date"),
    ]

    WILL_ORGAN_DONATION = [
        ("yes", "Yes, I wish to donate my organs"),
        ("no", "No, I do not wish to donate my organs"),
        ("specific", "I wish to donate specific organs only"),
    ]

    AGREEMENT_STATUS = [
        ("draft", "Draft"),
        ("active", "Active"),
        ("expired", "Expired"),
        ("cancelled", "Cancelled"),
    ]

    PARTICIPANT_STATUS = [
        ("active", "Active"),
        ("inactive", "Inactive"),
        ("pending", "Pending"),
    ]

    PROVIDER_AGREEMENT_STATUS = [
        ("active", "Active"),
        ("pending", "Pending"),
        ("expired", "Expired"),
        ("none", "No agreement"),
    ]

    BUDGET_CATEGORIES = ["Core", "Capacity Building", "Capital"]

    TRANSACTION_STATUS = [
        ("pending", "Pending"),
        ("processed", "Processed"),
        ("cancelled", "Cancelled"),
    ]
