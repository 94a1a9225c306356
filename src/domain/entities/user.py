from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserEntity:
    id: str
    name: str
    email: str
    password: str  # bcrypt hash, never the plaintext
    avatar: str
    date: datetime
