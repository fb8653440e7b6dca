"""Custom exceptions for the i18n core."""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            service.load_translation("el").result()
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class TranslationLoadError(I18nError):
    """Raised by loaders when a language's table cannot be produced.

    Attributes:
        lang: Language tag that failed to load.
    """

    def __init__(self, lang: str, message: str):
        self.lang = lang
        super().__init__(f"Failed to load translations for '{lang}': {message}")
