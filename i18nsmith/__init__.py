"""
i18nsmith - Automatic i18n extraction and translation for web front-ends
=========================================================================

Scans JavaScript/TypeScript/JSX/Vue/HTML sources for human-facing strings and:
- Extracts them into a JSON language file with stable keys
- Translates language files through DeepL, OpenAI or a pseudo-locale
- Rewrites the literals into t("key") calls and adds the i18n import
- Merges generated *.i18n.* files back over the originals

License: MIT
"""

__version__ = "0.3.0"

from . import core
from . import utils

__all__ = ['core', 'utils']
