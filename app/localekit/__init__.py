"""localekit - runtime translation service.

Example:
    from localekit.i18n import StaticTranslateLoader, TranslateService

    service = TranslateService(
        loader=StaticTranslateLoader({"en": {"greeting": "Hello {name}"}})
    )
    service.set_current_lang("en").result()
    service.instant("greeting", {"name": "Ada"})  # "Hello Ada"
"""

__version__ = "0.1.0"
