"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for record kinds, status values and select
options shown on the forms.
"""

# Collections managed by the data store
KINDS = ["admins", "candidates", "companies"]

KIND_LABELS = {
    "admins": "Admin",
    "candidates": "Candidate",
    "companies": "Company",
}

# Prefix used for generated record identifiers
ID_PREFIXES = {
    "admins": "adm",
    "candidates": "cand",
    "companies": "comp",
}

ADMIN_ROLES = ["Admin", "Moderator", "Super Admin"]
ADMIN_STATUSES = ["active", "inactive"]

CANDIDATE_STATUSES = ["new", "screening", "interview", "hired", "rejected"]

COMPANY_SIZES = ["1-49", "50-99", "100-499", "500-999", "1000+"]
COMPANY_STATUSES = ["active", "inactive"]

INDUSTRIES = [
    "Technology", "Finance", "Healthcare", "Education", "Retail",
    "Manufacturing", "Logistics", "Media", "Energy", "Consulting",
]

STATUSES_BY_KIND = {
    "admins": ADMIN_STATUSES,
    "candidates": CANDIDATE_STATUSES,
    "companies": COMPANY_STATUSES,
}

# Profile images larger than this are rejected (5 MB)
MAX_PROFILE_IMAGE_BYTES = 5 * 1024 * 1024

MIN_PASSWORD_LENGTH = 8

# Signed-in user restored when a token exists but no user was stored with it
DEFAULT_AUTH_USER = {
    'id': '1',
    'name': 'John Doe',
    'email': 'john.doe@example.com',
    'role': 'Super Admin',
}

AUTH_TOKEN = 'mock_token'

DEFAULT_PREFERENCES = {
    'email_notifications': True,
    'push_notifications': False,
    'marketing_emails': False,
    'two_factor_enabled': False,
}
