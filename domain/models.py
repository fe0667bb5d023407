from dataclasses import dataclass, field, fields
from typing import List, Dict, Optional, Any, Type, TypeVar

from utils.ids import utc_now_iso

T = TypeVar('T')


@dataclass
class Admin:
    id: str
    full_name: str = ''
    email: str = ''
    role: str = ''  # Admin | Moderator | Super Admin
    whatsapp_number: str = ''
    employee_id: str = ''
    designation: str = ''
    office_address: str = ''
    profile_image_url: Optional[str] = None
    status: str = 'active'  # active | inactive
    created_at: str = field(default_factory=utc_now_iso)


@dataclass
class Candidate:
    id: str
    name: str = ''
    email: str = ''
    phone: str = ''
    location: Optional[str] = None
    status: str = 'new'  # new | screening | interview | hired | rejected
    skills: List[str] = field(default_factory=list)
    created_at: str = field(default_factory=utc_now_iso)
    updated_at: Optional[str] = None


@dataclass
class Company:
    id: str
    name: str = ''
    industry: str = ''
    founded: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    size: str = '1-49'
    status: str = 'active'  # active | inactive
    created_at: str = field(default_factory=utc_now_iso)


@dataclass
class AuthUser:
    id: str
    name: str = ''
    email: str = ''
    role: str = ''
    avatar: Optional[str] = None
    phone: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None


def _from_dict(cls: Type[T], d: Dict[str, Any]) -> T:
    """Safe conversion dropping keys the dataclass does not declare."""
    allowed = {f.name for f in fields(cls)}
    filtered = {k: v for k, v in d.items() if k in allowed}
    # created_at optional
    if 'created_at' in allowed and not filtered.get('created_at'):
        filtered['created_at'] = utc_now_iso()
    return cls(**filtered)


def admin_from_dict(d: Dict[str, Any]) -> Admin:
    return _from_dict(Admin, d)


def candidate_from_dict(d: Dict[str, Any]) -> Candidate:
    data = dict(d)
    data['skills'] = list(data.get('skills') or [])
    return _from_dict(Candidate, data)


def company_from_dict(d: Dict[str, Any]) -> Company:
    return _from_dict(Company, d)


def auth_user_from_dict(d: Dict[str, Any]) -> AuthUser:
    return _from_dict(AuthUser, d)


MODEL_BY_KIND = {
    'admins': Admin,
    'candidates': Candidate,
    'companies': Company,
}

FROM_DICT_BY_KIND = {
    'admins': admin_from_dict,
    'candidates': candidate_from_dict,
    'companies': company_from_dict,
}
