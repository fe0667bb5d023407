"""Form validation. Every validator returns a `field -> message` dict; empty means valid."""
import re
from typing import Any, Dict, Iterable

from domain.constants import MAX_PROFILE_IMAGE_BYTES, MIN_PASSWORD_LENGTH

EMAIL_RE = re.compile(r'\S+@\S+\.\S+')
PHONE_RE = re.compile(r'^\+?[0-9\s\-]+$')
WEBSITE_RE = re.compile(r'^https?://\S+$', re.IGNORECASE)


def _blank(value: Any) -> bool:
    return not str(value or '').strip()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.search(value or ''))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_RE.match(value or ''))


def _require(errors: Dict[str, str], data: Dict[str, Any], field: str, message: str):
    if _blank(data.get(field)):
        errors[field] = message


def _check_email(errors: Dict[str, str], data: Dict[str, Any], required: bool = True):
    email = data.get('email')
    if _blank(email):
        if required:
            errors['email'] = 'Email is required'
    elif not is_valid_email(email):
        errors['email'] = 'Email is invalid'


def validate_admin(data: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _require(errors, data, 'full_name', 'Full name is required')
    _check_email(errors, data)
    _require(errors, data, 'role', 'Role is required')
    whatsapp = data.get('whatsapp_number')
    if not _blank(whatsapp) and not is_valid_phone(whatsapp):
        errors['whatsapp_number'] = 'Invalid WhatsApp number'
    _require(errors, data, 'employee_id', 'Employee ID is required')
    _require(errors, data, 'designation', 'Designation is required')
    return errors


def validate_candidate(data: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _require(errors, data, 'name', 'Name is required')
    _check_email(errors, data)
    phone = data.get('phone')
    if _blank(phone):
        errors['phone'] = 'Phone is required'
    elif not is_valid_phone(phone):
        errors['phone'] = 'Phone is invalid'
    return errors


def validate_company(data: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _require(errors, data, 'name', 'Company name is required')
    _check_email(errors, data, required=False)
    phone = data.get('phone')
    if not _blank(phone) and not is_valid_phone(phone):
        errors['phone'] = 'Phone is invalid'
    website = data.get('website')
    if not _blank(website) and not WEBSITE_RE.match(website.strip()):
        errors['website'] = 'Website must start with http:// or https://'
    return errors


def validate_skill(skill: str, existing: Iterable[str]) -> Dict[str, str]:
    value = (skill or '').strip()
    if not value:
        return {'skill': 'Skill cannot be empty'}
    if value in set(existing):
        return {'skill': 'Skill already exists'}
    return {}


def validate_profile_image(size_bytes: int) -> Dict[str, str]:
    if size_bytes > MAX_PROFILE_IMAGE_BYTES:
        return {'profile_image': 'File size must be less than 5MB'}
    return {}


def validate_profile(data: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    _require(errors, data, 'name', 'Name is required')
    _check_email(errors, data)
    return errors


def validate_password_change(current: str, new: str, confirm: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not current:
        errors['current_password'] = 'Current password is required'
    if not new:
        errors['new_password'] = 'New password is required'
    elif len(new) < MIN_PASSWORD_LENGTH:
        errors['new_password'] = f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
    if new != confirm:
        errors['confirm_password'] = 'Passwords do not match'
    return errors
