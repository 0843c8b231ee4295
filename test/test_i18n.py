import pytest

from dualpascal.i18n import Locale, counterpart_locale, is_supported_locale, pick_localized


class TestLocale:
    @pytest.mark.parametrize("locale, expected", [("ja", "en"), ("en", "ja"), (Locale.JA, "en")])
    def test_counterpart(self, locale, expected):
        assert counterpart_locale(locale) == expected

    def test_counterpart_of_unsupported_locale(self):
        with pytest.raises(ValueError):
            counterpart_locale("fr")

    def test_supported(self):
        assert is_supported_locale("ja")
        assert not is_supported_locale("de")
        assert not is_supported_locale(None)


class TestPickLocalized:
    def test_prefers_requested_locale(self):
        assert pick_localized({"ja": "日本", "en": "Japan"}, "en") == "Japan"

    def test_falls_back_to_counterpart(self):
        assert pick_localized({"ja": "日本", "en": ""}, "en") == "日本"

    def test_falls_back_to_default(self):
        assert pick_localized({"ja": None, "en": None}, "ja", default="x") == "x"
