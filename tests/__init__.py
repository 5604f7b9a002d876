# tests/__init__.py
"""
Test suite for the morphology engine.

Organization:
- Rules: verbs, conjugation, nouns, adjectives/adverbs, clauses, articles and pronouns,
  exercised through an English engine on an in-memory overrides store.
- Text: tokenizer and the engine's text operations.
- Infrastructure: overrides store, repository adapters (filesystem, mocked Redis,
  memory), settings, the DI container and logging.
"""
