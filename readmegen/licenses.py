"""Known license identifiers and their canonical text URLs."""

from __future__ import annotations

from typing import Dict, Optional

_SPDX_URLS: Dict[str, str] = {
    "MIT": "https://opensource.org/licenses/MIT",
    "ISC": "https://opensource.org/licenses/ISC",
    "Apache-2.0": "https://www.apache.org/licenses/LICENSE-2.0",
    "BSD-2-Clause": "https://opensource.org/licenses/BSD-2-Clause",
    "BSD-3-Clause": "https://opensource.org/licenses/BSD-3-Clause",
    "0BSD": "https://opensource.org/licenses/0BSD",
    "GPL-2.0": "https://www.gnu.org/licenses/old-licenses/gpl-2.0.html",
    "GPL-2.0-only": "https://www.gnu.org/licenses/old-licenses/gpl-2.0.html",
    "GPL-2.0-or-later": "https://www.gnu.org/licenses/old-licenses/gpl-2.0.html",
    "GPL-3.0": "https://www.gnu.org/licenses/gpl-3.0.html",
    "GPL-3.0-only": "https://www.gnu.org/licenses/gpl-3.0.html",
    "GPL-3.0-or-later": "https://www.gnu.org/licenses/gpl-3.0.html",
    "LGPL-2.1": "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
    "LGPL-2.1-only": "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
    "LGPL-2.1-or-later": "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.html",
    "LGPL-3.0": "https://www.gnu.org/licenses/lgpl-3.0.html",
    "LGPL-3.0-only": "https://www.gnu.org/licenses/lgpl-3.0.html",
    "LGPL-3.0-or-later": "https://www.gnu.org/licenses/lgpl-3.0.html",
    "AGPL-3.0": "https://www.gnu.org/licenses/agpl-3.0.html",
    "AGPL-3.0-only": "https://www.gnu.org/licenses/agpl-3.0.html",
    "AGPL-3.0-or-later": "https://www.gnu.org/licenses/agpl-3.0.html",
    "MPL-2.0": "https://www.mozilla.org/en-US/MPL/2.0/",
    "EPL-2.0": "https://www.eclipse.org/legal/epl-2.0/",
    "Unlicense": "https://unlicense.org/",
    "CC0-1.0": "https://creativecommons.org/publicdomain/zero/1.0/",
    "WTFPL": "http://www.wtfpl.net/about/",
}


def normalize_license_key(name: str) -> str:
    """Normalize a license identifier to simplify matching."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


_BY_KEY: Dict[str, str] = {normalize_license_key(key): url for key, url in _SPDX_URLS.items()}


def license_url_for(identifier: str | None) -> Optional[str]:
    """Return the canonical URL for a known SPDX identifier, else None."""
    if not identifier:
        return None
    return _BY_KEY.get(normalize_license_key(identifier))


__all__ = ["license_url_for", "normalize_license_key"]
