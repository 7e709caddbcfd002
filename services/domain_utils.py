from __future__ import annotations

import unicodedata
from typing import Optional
from urllib.parse import unquote, urlparse


def is_linkedin_profile_url(url: Optional[str]) -> bool:
    return normalize_linkedin_profile_url(url) is not None


def normalize_linkedin_profile_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    u = urlparse(url.strip())
    host = (u.netloc or '').lower()
    if host.startswith('www.'):
        host = host[4:]
    path = (u.path or '').rstrip('/')
    if not host:
        return None
    if not (host == 'linkedin.com' or host.endswith('.linkedin.com')) or not path.startswith('/in/'):
        return None
    # Keep only /in/{slug} and drop trailing locale/segments (e.g., /de, /en)
    parts = [p for p in path.split('/') if p]
    if len(parts) < 2:
        return None
    # Decode percent-encoding and normalize Unicode; canonicalize to lowercase
    slug = unicodedata.normalize('NFKC', unquote(parts[1])).strip().lower()
    # Remove invisible characters occasionally present
    slug = slug.replace('\u200b', '').replace('\u200c', '').replace('\u200d', '')
    if not slug:
        return None
    return f"https://linkedin.com/in/{slug}"
