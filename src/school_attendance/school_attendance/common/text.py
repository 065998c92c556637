from __future__ import annotations

import re
import secrets
import time
import unicodedata


def generate_id(prefix: str) -> str:
    """Unique, prefix-tagged id such as ``stu_1718000000000_k3j9x0a1b``."""
    millis = int(time.time() * 1000)
    return f"{prefix}_{millis}_{secrets.token_hex(5)[:9]}"


def email_for(name: str, domain: str) -> str:
    local = re.sub(r"\s+", ".", name.lower())
    local = re.sub(r"[^a-z0-9.]", "", local)
    return f"{local}@{domain}"


def slugify(name: str) -> str:
    slug = re.sub(r"\s+", "-", name.lower())
    return re.sub(r"[^a-z0-9-]", "", slug)


def collation_key(value: str) -> tuple[str, str]:
    """Case-insensitive sort key; the original spelling only breaks ties.

    Independent of the process locale, so "alice" sorts before "Bob".
    """
    return unicodedata.normalize("NFKD", value).casefold(), value
