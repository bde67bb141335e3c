"""English (United Kingdom) localise."""

from typing import List

from infrastructure.i18n.localise.base import register_localise


@register_localise("en-GB")
class EnGbLocalise:
    """Plural and search rules for en-GB."""

    @staticmethod
    def get_plural_suffixes(count: int) -> List[str]:
        if count == 0:
            return ["0"]
        if count == 1:
            return ["ONE", "1"]
        return ["OTHER", "MORE"]

    @staticmethod
    def get_ignored_search_words() -> List[str]:
        return ["and", "in", "on"]

    @staticmethod
    def get_lower_limit_search_word() -> int:
        return 3

    @staticmethod
    def get_upper_limit_search_word() -> int:
        return 200

    @staticmethod
    def get_search_displayed_characters_number() -> int:
        return 200
