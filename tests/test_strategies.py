import pytest

from i18nsmith.core.exceptions import ConfigError
from i18nsmith.core.strategies import ReplacementStrategy


@pytest.mark.parametrize("strategy, in_jsx, expected", [
    (ReplacementStrategy.REACT_I18N, True, '{t("save_changes")}'),
    (ReplacementStrategy.REACT_I18N, False, 't("save_changes")'),
    (ReplacementStrategy.VUE_I18N, True, "{{ $t('save_changes') }}"),
    (ReplacementStrategy.VUE_I18N, False, "{{ $t('save_changes') }}"),
    (ReplacementStrategy.GENERIC, True, 't("save_changes")'),
    (ReplacementStrategy.GENERIC, False, 't("save_changes")'),
])
def test_translate_call(strategy, in_jsx, expected):
    assert strategy.translate_call("save_changes", in_jsx) == expected


def test_import_statements():
    assert ReplacementStrategy.REACT_I18N.import_statement() == "import { useTranslation } from 'react-i18next';"
    assert ReplacementStrategy.VUE_I18N.import_statement() == "import { useI18n } from 'vue-i18n';"
    assert ReplacementStrategy.GENERIC.import_statement() == "import { t } from './i18n';"


def test_from_string():
    assert ReplacementStrategy.from_string("react-i18n") is ReplacementStrategy.REACT_I18N
    assert ReplacementStrategy.from_string(" Vue-I18n ") is ReplacementStrategy.VUE_I18N
    assert ReplacementStrategy.from_string("generic") is ReplacementStrategy.GENERIC
    with pytest.raises(ConfigError):
        ReplacementStrategy.from_string("angular")
