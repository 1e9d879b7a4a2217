# CLI package for refined
"""
Read-only diagnostic CLI for the built-in predicates.

Commands:
    refined list      — List named predicates
    refined check     — Evaluate a predicate against a value
    refined explain   — Show how a predicate is composed
    refined scan      — Evaluate a predicate per character of a text
"""
