"""Shared pytest fixtures for param_comment tests."""

import pytest
from param_comment import CheckConfig, DocumentationParser, ParamCommentCheck, SignatureParser


@pytest.fixture
def config():
    return CheckConfig()


@pytest.fixture
def signature_parser(config):
    """A fresh SignatureParser per test."""
    return SignatureParser(config)


@pytest.fixture
def comment_parser(config):
    """A fresh DocumentationParser per test."""
    return DocumentationParser(config)


@pytest.fixture
def check(config):
    """
    The full per-declaration check.

    Example:
        def test_clean(check):
            tokens, decl = declaration(CODE)
            assert check.check_declaration(tokens, decl) == []
    """
    return ParamCommentCheck(config)
