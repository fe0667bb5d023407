from dataclasses import asdict
import datetime as dt
import random
from typing import Optional

from domain.models import Admin, Candidate, Company
from domain.constants import (
    ADMIN_ROLES, ADMIN_STATUSES, CANDIDATE_STATUSES, COMPANY_SIZES,
    COMPANY_STATUSES, INDUSTRIES, ID_PREFIXES,
)
from utils import config

FIRST_NAMES = ["Alex", "Priya", "Marco", "Chen", "Fatima", "Lucas", "Aiko", "Noah",
               "Sofia", "Omar", "Grace", "Ivan"]
LAST_NAMES = ["Smith", "Patel", "Rossi", "Wang", "Khan", "Silva", "Tanaka", "Brown",
              "Garcia", "Haddad", "Kim", "Petrov"]
CITIES = ["New York", "London", "Berlin", "Singapore", "Toronto", "Sydney", "Dubai"]
SKILLS = ["Python", "SQL", "React", "AWS", "Docker", "Figma", "Sales", "Excel",
          "Kubernetes", "Go", "Marketing", "Data Analysis"]
DESIGNATIONS = ["Operations Lead", "HR Manager", "Recruiter", "Support Engineer", "Team Lead"]
COMPANY_WORDS = ["Nimbus", "Vertex", "Bluefin", "Quartz", "Harbor", "Atlas", "Lumen", "Crescent"]
COMPANY_SUFFIXES = ["Labs", "Systems", "Group", "Partners", "Works"]


def _created_at(rng: random.Random) -> str:
    stamp = dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=rng.randint(0, 365))
    return stamp.replace(microsecond=0).isoformat().replace('+00:00', 'Z')


def _person(rng: random.Random):
    first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
    return f"{first} {last}", f"{first}.{last}".lower()


def _phone(rng: random.Random) -> str:
    return f"+1 555-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}"


def make_admins(n: int, rng: random.Random):
    admins = []
    for i in range(n):
        name, handle = _person(rng)
        admins.append(Admin(
            id=f"{ID_PREFIXES['admins']}_seed_{i + 1}",
            full_name=name,
            email=f"{handle}@example.com",
            role=rng.choice(ADMIN_ROLES),
            whatsapp_number=_phone(rng),
            employee_id=f"EMP{1001 + i}",
            designation=rng.choice(DESIGNATIONS),
            office_address=f"{rng.randint(1, 400)} Market Street, {rng.choice(CITIES)}",
            status=rng.choice(ADMIN_STATUSES),
            created_at=_created_at(rng),
        ))
    return admins


def make_candidates(n: int, rng: random.Random):
    candidates = []
    for i in range(n):
        name, handle = _person(rng)
        candidates.append(Candidate(
            id=f"{ID_PREFIXES['candidates']}_seed_{i + 1}",
            name=name,
            email=f"{handle}@mail.com",
            phone=_phone(rng),
            location=rng.choice(CITIES),
            status=rng.choice(CANDIDATE_STATUSES),
            skills=rng.sample(SKILLS, k=rng.randint(1, 4)),
            created_at=_created_at(rng),
        ))
    return candidates


def make_companies(n: int, rng: random.Random):
    companies = []
    for i in range(n):
        word = rng.choice(COMPANY_WORDS)
        name = f"{word} {rng.choice(COMPANY_SUFFIXES)}"
        slug = word.lower()
        companies.append(Company(
            id=f"{ID_PREFIXES['companies']}_seed_{i + 1}",
            name=name,
            industry=rng.choice(INDUSTRIES),
            founded=str(rng.randint(1980, 2022)),
            website=f"https://www.{slug}.com",
            email=f"contact@{slug}.com",
            phone=_phone(rng),
            address=f"{rng.randint(1, 900)} Commerce Ave, {rng.choice(CITIES)}",
            size=rng.choice(COMPANY_SIZES),
            status=rng.choice(COMPANY_STATUSES),
            created_at=_created_at(rng),
        ))
    return companies


def generate_mock_data(n: Optional[int] = None, seed: Optional[int] = None):
    """Create n records of each kind, keyed like the data store collections.

    seed: optional random seed for reproducible data (tests).
    """
    count = config.SEED_COUNT if n is None else n
    rng = random.Random(seed)
    return {
        'admins': [asdict(a) for a in make_admins(count, rng)],
        'candidates': [asdict(c) for c in make_candidates(count, rng)],
        'companies': [asdict(c) for c in make_companies(count, rng)],
    }
