"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services enforce validation and role rules, then call repositories for DB
operations. Each service takes its repositories as constructor arguments;
the module-level singletons are handed to routers through the provider
functions in ``store_ratings.api.deps``.
"""
