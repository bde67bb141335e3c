"""Infrastructure modules for the language resolver.

Centralized infrastructure components:
- configuration: Settings management (settings, LanguageSettings)
- logging: Structured logging (get_module_logger, logger)
- i18n: Language loading, lookup and per-language callbacks
- services: Application-scoped providers (get_settings, get_language_factory)
"""
