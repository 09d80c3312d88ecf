"""
Replacement strategies: how a translation call and its import look for a
given front-end i18n convention.
"""

from __future__ import annotations

from enum import Enum

from .exceptions import ConfigError


class ReplacementStrategy(Enum):
    REACT_I18N = "react-i18n"  # {t("key")} with react-i18next
    VUE_I18N = "vue-i18n"      # {{ $t('key') }} with vue-i18n
    GENERIC = "generic"        # t("key") with a local i18n module

    @classmethod
    def from_string(cls, name: str) -> "ReplacementStrategy":
        normalized = (name or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        supported = ", ".join(m.value for m in cls)
        raise ConfigError(f"Unknown strategy: {name}. Supported: {supported}")

    def import_statement(self) -> str:
        return _IMPORT_STATEMENTS[self]

    def translate_call(self, key: str, in_jsx: bool = False) -> str:
        if self is ReplacementStrategy.REACT_I18N:
            if in_jsx:
                return f'{{t("{key}")}}'
            return f't("{key}")'
        if self is ReplacementStrategy.VUE_I18N:
            return f"{{{{ $t('{key}') }}}}"
        return f't("{key}")'


_IMPORT_STATEMENTS = {
    ReplacementStrategy.REACT_I18N: "import { useTranslation } from 'react-i18next';",
    ReplacementStrategy.VUE_I18N: "import { useI18n } from 'vue-i18n';",
    ReplacementStrategy.GENERIC: "import { t } from './i18n';",
}
